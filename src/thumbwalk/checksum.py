# -*- coding: UTF-8 -*-
"""
module checksum.py
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
file_minor = "1"
file_micro = "0"

"""
CRC-64 (ECMA-182 polynomial, reflected, all ones init and final xor) used to
check the data and header checksums recorded in a cache entry.
"""

CRC64_POLY = 0xC96C5795D7870F42  # ECMA-182, bit reversed
CRC64_MASK = 0xFFFFFFFFFFFFFFFF


def makeTable():
    listTable = []
    for iByte in range(256):
        iCRC = iByte
        for _ in range(8):
            if (iCRC & 1):
                iCRC = (iCRC >> 1) ^ CRC64_POLY
            else:
                iCRC >>= 1
        listTable.append(iCRC)
    return tuple(listTable)


CRC64_TABLE = makeTable()


def crc64(byteData, iCRC = 0):
    # Continue a CRC-64 over byteData...
    #   Pass a prior result as iCRC to checksum data in pieces
    iCRC ^= CRC64_MASK
    for iByte in bytearray(byteData):
        iCRC = CRC64_TABLE[(iCRC ^ iByte) & 0xFF] ^ (iCRC >> 8)
    return iCRC ^ CRC64_MASK
