# -*- coding: UTF-8 -*-
"""
module processor.py
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
import os
import fnmatch

import thumbwalk.config as config
import thumbwalk.thumbCMMM as thumbCMMM
import thumbwalk.utils as utils
import thumbwalk.error as terror


###############################################################################
# Thumbwalk Processor Class
###############################################################################
class Processor():
    def __init__(self):
        # Initialize a new Processor instance...
        self.iFiles = 0
        self.iFailed = 0


    def __problem(self, strMsg):
        # Single file mode stops on a problem, directory modes continue...
        if (config.ARGS.mode == "f"):
            raise terror.ProcessError(" Error (Process): " + strMsg)
        elif (config.ARGS.verbose >= 0):
            sys.stderr.write(" Warning: " + strMsg + "\n")
        return


    def processThumbFile(self, infile):
        # Read given Thumbnail file...
        try:
            with open(infile, "rb") as fileThumbsDB:
                byteBuffer = fileThumbsDB.read()
        except EnvironmentError:
            self.__problem("Cannot open file " + infile)
            return None

        self.iFiles += 1

        # Setup file Header information...
        dictHead = {}
        dictHead["FilePath"] = infile
        dictHead["FileSize"] = len(byteBuffer)
        dictHead["MD5"] = None
        dictHead["FileType"] = None

        # Get MD5 of file...
        if (config.ARGS.md5force) or ((not config.ARGS.md5never) and (dictHead["FileSize"] < config.MD5_MAX_SIZE)):
            dictHead["MD5"] = utils.getMD5(byteBuffer)

        # -----------------------------------------------------------------------------
        # Begin analysis output...

        if (config.ARGS.verbose >= 0):
            print(config.STR_SEP)
            print(" File: %s" % dictHead["FilePath"])
            if (dictHead["MD5"] != None):
                print("  MD5: %s" % dictHead["MD5"])
            print(config.STR_SEP)

        # -----------------------------------------------------------------------------
        # Analyzing header block...

        bstrSig = byteBuffer[0:4]
        if   (bstrSig == config.THUMBS_SIG_CMMM):
            dictHead["FileType"] = config.THUMBS_TYPE_CMMM
        elif (bstrSig == config.THUMBS_SIG_IMMM):
            dictHead["FileType"] = config.THUMBS_TYPE_IMMM
            if (config.ARGS.verbose >= 0):
                sys.stderr.write(" Warning: Skipping index database %s, not a cache database\n" % infile)
            return None
        else:  # ...Header Signature not found...
            self.__problem("Header Signature not found in " + dictHead["FilePath"])
            return None

        tdbWalker = thumbCMMM.process(dictHead["FilePath"], byteBuffer)

        if (tdbWalker.isFailed()):
            self.iFailed += 1
            if (config.ARGS.mode == "f"):
                raise tdbWalker.error
            elif (config.ARGS.verbose >= 0):
                sys.stderr.write(" Warning: %s stopped: %s\n" % (infile, str(tdbWalker.error)))

        return tdbWalker


    def processDirectory(self, thumbDir, filenames = None):
        # Search for thumbnail cache files:
        #  thumbcache_*.db (2560, 1920, 1280, 768, 256, 96, 48, 32, 16, sr, wide, exif, wide_alternate, custom_stream)
        #  but not the thumbcache_idx.db index
        if (filenames == None):
            filenames = []
            with os.scandir(thumbDir) as iterFiles:
                for fileEntry in iterFiles:
                    if fileEntry.is_file():
                        filenames.append(fileEntry.name)

        tc_files = []
        for filename in sorted(fnmatch.filter(filenames, config.THUMBCACHE_FILES)):
            if (filename.lower() == config.THUMBCACHE_INDEX):
                continue
            tc_files.append(os.path.join(thumbDir, filename))

        for thumbFile in tc_files:
            self.processThumbFile(thumbFile)

        return


    def processRecursiveDirectory(self, thumbDir):
        # Walk the directories from given directory recursively down...
        for dirpath, dirnames, filenames in os.walk(thumbDir):
            dirnames.sort()
            self.processDirectory(dirpath, filenames)

        return
