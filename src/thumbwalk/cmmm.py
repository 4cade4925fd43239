# -*- coding: UTF-8 -*-
"""
module cmmm.py
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

"""
CMMM thumbcache structure decoding.

The database is a flat little-endian buffer: a 24 byte header followed by a
chain of cache entries.  Every entry is a 56 byte fixed header, then a
UTF-16LE filename, padding and the payload.  Decoding here is pure: nothing
is read from disk and nothing is printed.
"""

from collections import namedtuple
from struct import unpack_from

import thumbwalk.config as config
import thumbwalk.error as terror
import thumbwalk.checksum as checksum


DatabaseHeader = namedtuple("DatabaseHeader",
                            ["magic", "version", "cache_type", "unknown",
                             "first_entry_offset", "available_entry_offset",
                             "format_name", "cache_type_name"])

CacheEntry = namedtuple("CacheEntry",
                        ["magic", "entry_size", "hash", "filename_length",
                         "padding_size", "data_size", "width", "height",
                         "unknown", "data_checksum", "header_checksum"])


def getFormatName(iFormatType):
    for strName, iValue in config.TC_FORMAT_TYPE.items():
        if (iValue == iFormatType):
            return strName
    return None


def getCacheTypeName(iCacheType):
    # Return the cache variant name or None when unrecognized...
    if (0 <= iCacheType < len(config.TC_CACHE_TYPE)):
        return config.TC_CACHE_TYPE[iCacheType]
    return None


def getCacheFileName(header):
    if (header.cache_type_name == None):
        return "Unknown Type"
    return "thumbcache_" + header.cache_type_name + ".db"


def decodeHeader(byteBuffer):
    """
    Decode the database header at the start of byteBuffer.

    Raises TooShortError, BadMagicError or OffsetOutOfRangeError when the
    header can not be used.  An unknown cache type raises
    UnknownCacheTypeError last, carrying the decoded header so the caller
    may continue with it.
    """
    iLength = len(byteBuffer)
    if (iLength < config.TC_HEADER_SIZE):
        raise terror.TooShortError("Buffer of %d bytes too small for a %d byte header" %
                                   (iLength, config.TC_HEADER_SIZE), 0)

    (tDB_sig, tDB_version, tDB_cacheType, tDB_unknown,
     tDB_off1st, tDB_off1stAvail) = unpack_from(config.TC_HEADER_FORMAT, byteBuffer, 0)

    if (tDB_sig != config.THUMBS_SIG_CMMM):
        raise terror.BadMagicError("Header signature %r is not %r" % (tDB_sig, config.THUMBS_SIG_CMMM), 0)

    if (tDB_off1st < config.TC_HEADER_SIZE or tDB_off1st > iLength):
        raise terror.OffsetOutOfRangeError("First entry offset %d outside [%d, %d]" %
                                           (tDB_off1st, config.TC_HEADER_SIZE, iLength), 0)

    header = DatabaseHeader(tDB_sig, tDB_version, tDB_cacheType, tDB_unknown,
                            tDB_off1st, tDB_off1stAvail,
                            getFormatName(tDB_version), getCacheTypeName(tDB_cacheType))

    if (header.cache_type_name == None):
        raise terror.UnknownCacheTypeError("Cache type %d is not a known cache type" % tDB_cacheType, 0, header)

    return header


def decodeEntry(byteBuffer, iOffset):
    """
    Decode the fixed cache entry header at iOffset.

    Raises TooShortError, BadMagicError, ZeroSizedEntryError or
    MalformedFilenameError.  Checksums are not examined.
    """
    iLength = len(byteBuffer)
    if (iOffset < 0 or iOffset > config.TC_OFFSET_MAX - config.TC_ENTRY_SIZE or
            iOffset + config.TC_ENTRY_SIZE > iLength):
        raise terror.TooShortError("Remaining %d bytes too small for a %d byte cache entry" %
                                   (max(iLength - iOffset, 0), config.TC_ENTRY_SIZE), iOffset)

    entry = CacheEntry._make(unpack_from(config.TC_ENTRY_FORMAT, byteBuffer, iOffset))

    if (entry.magic != config.THUMBS_SIG_CMMM):
        raise terror.BadMagicError("Entry signature %r is not %r" % (entry.magic, config.THUMBS_SIG_CMMM), iOffset)
    if (entry.entry_size == 0):
        raise terror.ZeroSizedEntryError("Entry size is zero", iOffset)
    if (entry.filename_length % 2 != 0):
        raise terror.MalformedFilenameError("Filename length %d is not a whole number of UTF-16 units" %
                                            entry.filename_length, iOffset)
    return entry


def verifyChecksums(byteBuffer, iOffset, entry, byteData):
    """
    Compare the entry's stored checksums with CRC-64 values computed over
    the fixed header bytes before the checksum fields and over the payload.
    A stored value of zero is treated as not recorded.

    Raises ChecksumMismatchError on the first difference.
    """
    if (entry.data_checksum != 0):
        iDataCRC = checksum.crc64(byteData)
        if (iDataCRC != entry.data_checksum):
            raise terror.ChecksumMismatchError("Data checksum %016x, computed %016x" %
                                               (entry.data_checksum, iDataCRC), iOffset)

    if (entry.header_checksum != 0):
        byteHead = byteBuffer[iOffset : iOffset + config.TC_ENTRY_CHECKED_SIZE]
        iHeadCRC = checksum.crc64(byteHead)
        if (iHeadCRC != entry.header_checksum):
            raise terror.ChecksumMismatchError("Header checksum %016x, computed %016x" %
                                               (entry.header_checksum, iHeadCRC), iOffset)
    return
