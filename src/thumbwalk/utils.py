# -*- coding: UTF-8 -*-
"""
module utils.py
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
file_minor = "5"
file_micro = "0"


import thumbwalk.config as config
import thumbwalk.error as terror


def decodeBytes(byteString):
    # Convert bytes encoded as utf-16-le to standard unicode...
    #   Unpaired surrogates and stray bytes are replaced, not fatal
    return str(byteString, "utf-16-le", "replace").rstrip("\x00")


def getHexSample(byteString, iLength = 16):
    # Return the first bytes as spaced hex for diagnostics...
    return " ".join("%02X" % iByte for iByte in bytearray(byteString[:iLength]))


def getHexHash(iHash):
    return format(iHash, "016x")


def addOffset(iBase, iAdd, iOffset):
    # Add a size to an offset, rejecting any sum past the offset width...
    #   iOffset is the entry offset reported on failure
    iResult = iBase + iAdd
    if (iResult > config.TC_OFFSET_MAX):
        raise terror.OffsetOutOfRangeError("Offset %d + %d overflows %d bits" %
                                           (iBase, iAdd, config.TC_OFFSET_MAX.bit_length()), iOffset)
    return iResult


def checkRegion(strName, iStart, iEnd, iLimit, iOffset):
    # Test a [iStart, iEnd) region against the buffer length...
    if (iStart > iEnd or iEnd > iLimit):
        raise terror.OffsetOutOfRangeError("%s region [%d, %d) exceeds buffer length %d" %
                                           (strName, iStart, iEnd, iLimit), iOffset)
    return


def getMD5(byteString):
    from hashlib import md5
    return md5(byteString).hexdigest()
