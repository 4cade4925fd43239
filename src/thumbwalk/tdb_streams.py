# -*- coding: UTF-8 -*-
"""
module tdb_streams.py
-----------------------------------------------------------------------------

 Thumbwalk : a forensics tool to decode Thumbcache Database files
 Copyright (C) 2005, 2006 by Michel Roukine
 Copyright (C) 2019-2020 by Keven L. Ates

This file is part of Thumbwalk.

 Thumbwalk is free software; you can redistribute it and/or
 modify it under the terms of the GNU General Public License as published
 by the Free Software Foundation; either version 2 of the License, or (at
 your option) any later version.

 Thumbwalk is distributed in the hope that it will be
 useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
 MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
 General Public License for more details.

 You should have received a copy of the GNU General Public License along
 with the thumbwalk package; if not, write to the Free Software
 Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307 USA

-----------------------------------------------------------------------------
"""


file_major = "0"
file_minor = "2"
file_micro = "0"


import sys

from collections.abc import MutableMapping


###############################################################################
# Thumbwalk Thumb Database Streams Class
#   Tracks the output name of every extracted thumbnail by its entry hash.
# Input: strKey, [strExt, strFileName]
# Store: {strKey, [ [strExt], [strFileName] ] }
###############################################################################
class TDB_Streams(MutableMapping):
    def __init__(self, data=()):
        # Initialize a new TDB_Streams instance...
        self.__tdbStreams = {}  # {strKey, [ [strExt], [strFileName] ] }
        self.__dictCount = 0
        self.update(data)


    def __getitem__(self, key):
        return self.__tdbStreams[key]


    def __delitem__(self, key):
        self.__dictCount -= len(self[key][1])
        del self.__tdbStreams[key]


    def __setitem__(self, key, value):
        # Add or append a Stream entry...
        # value => [strExt, strFileName]
        if (not isinstance(key, str)):
            raise TypeError("Invalid: Stream key must be a string representing a thumbnail hash!")
        if (not isinstance(value, list)):
            raise TypeError("Not list: Stream value must be a list of 2 items - file extension string and file name string!")
        if (len(value) != 2):
            raise ValueError("Not 2 items: Stream value must be a list of 2 items - file extension string and file name string!")
        if not (isinstance(value[0], str) and isinstance(value[1], str)):
            raise TypeError("Not string: Stream values must be a file extension string and a file name string!")

        if (key in self.__tdbStreams):  # ...append a Stream entry...
            if (not value[0] in self.__tdbStreams[key][0]):  # ...append ext...
                self.__tdbStreams[key][0].append(value[0])
                sys.stderr.write(" Warning: Stream \"%s\" has more than one file extension\n" % key)
            self.__tdbStreams[key][1].append(value[1])
        else:  # ...add a new Stream entry...
            self.__tdbStreams[key] = [ [ value[0] ], [ value[1] ] ]
        self.__dictCount += 1
        return


    def __iter__(self):
        return iter(self.__tdbStreams)


    def __len__(self):
        return len(self.__tdbStreams)


    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.__tdbStreams)


    def getCount(self):
        # Return number of stored names over all keys...
        return self.__dictCount


    def getFileName(self, key, strExt):
        # Compute the next free file name for a key and record it...
        # FORMAT: XXX or XXX_# where XXX is the key
        #                        and # is an increment value for repeated keys
        strComputedFileName = key
        if (key in self.__tdbStreams):
            iCount = len(self.__tdbStreams[key][1])
            strComputedFileName = key + "_" + str(iCount)

        # Add or append to self -- see __setitem__()...
        self[key] = [strExt, strComputedFileName]
        # Return filename...
        return strComputedFileName + "." + strExt


    def extractStats(self, strOutDir = None):
        if (self.__tdbStreams == {}):
            return None

        # Return extraction statistics...
        dictStats = {"u": 0, "e": 0 }
        for key in self.__tdbStreams:
            for strFileName in self.__tdbStreams[key][1]:
                if (strFileName == ""):
                    dictStats["u"] += 1
                else:
                    dictStats["e"] += 1

        strExtSuffix = ""
        if (strOutDir != None):
            strExtSuffix = " to " + strOutDir

        astrStats = []
        if (dictStats["u"] > 0):
            astrStats.append("Unextracted: %4d thumbnails" % dictStats["u"])
        if (dictStats["e"] > 0):
            astrStats.append("  Extracted: %4d thumbnails" % dictStats["e"] + strExtSuffix)
        if (len(astrStats) == 0):
            return None

        return astrStats
