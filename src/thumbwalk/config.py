# -*- coding: UTF-8 -*-
"""
module config.py
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



THUMBCACHE_FILES  = "thumbcache_*.db"
THUMBCACHE_INDEX  = "thumbcache_idx.db"

THUMBS_TYPE_CMMM = 1
THUMBS_TYPE_IMMM = 2

THUMBS_SIG_CMMM = b"CMMM"  # Standard Sig for Thumbcache_*.db files
THUMBS_SIG_IMMM = b"IMMM"  # Standard Sig for Thumbcache_*.db Index files

THUMBS_FILE_TYPES = {THUMBS_TYPE_CMMM: "CMMM (Thumbcache_*.db)", THUMBS_TYPE_IMMM: "IMMM (Thumbcache_*.db)"}

# CMMM Database Header [24 bytes]
# ------------------------------------------------------------
#BYTE Signature[4]        "CMMM"
#UINT Format Type         see TC_FORMAT_TYPE
#UINT Cache Type          see TC_CACHE_TYPE
#UINT Unknown
#UINT First Entry Offset
#UINT First Available Entry Offset
TC_HEADER_FORMAT = "<4sLLLLL"
TC_HEADER_SIZE   = 24

# CMMM Cache Entry Header [56 bytes]
# ------------------------------------------------------------
#BYTE  Signature[4]       "CMMM"
#UINT  Entry Size         header + filename + padding + data
#ULONG Entry Hash
#UINT  Filename Size      UTF-16LE bytes, even
#UINT  Padding Size
#UINT  Data Size
#UINT  Image Width
#UINT  Image Height
#UINT  Unknown
#ULONG Data Checksum
#ULONG Header Checksum
TC_ENTRY_FORMAT = "<4sLQLLLLLLQQ"
TC_ENTRY_SIZE   = 56
# Entry header bytes covered by the header checksum (up to the checksums)...
TC_ENTRY_CHECKED_SIZE = 40

# Offsets are carried as 64 bit unsigned values...
TC_OFFSET_MAX = 0xFFFFFFFFFFFFFFFF

TC_FORMAT_TYPE = { "Windows Vista" : 0x14,
                   "Windows 7"     : 0x15,
                   "Windows 8"     : 0x1A,
                   "Windows 8 v2"  : 0x1C,
                   "Windows 8 v3"  : 0x1E,
                   "Windows 8.1"   : 0x1F,
                   "Windows 10"    : 0x20,
                 }

# Cache Types that the file "thumbcache_XXX.db" may represent
#   Index: .> 00    01    02    03     04     05      06      07      08    09      0A      0B               0C               0D
TC_CACHE_TYPE = ( "16", "32", "48", "96", "256", "768", "1280", "1920", "2560", "sr", "wide", "exif", "wide_alternate", "custom_stream" )

# Payload signature sniffing reads no more than...
SNIFF_MAX_LENGTH = 128

# Extension used when no signature matches a payload...
UNKNOWN_EXT = "img"

CHECKSUM_OFF    = "off"
CHECKSUM_WARN   = "warn"
CHECKSUM_STRICT = "strict"
CHECKSUM_MODES  = (CHECKSUM_OFF, CHECKSUM_WARN, CHECKSUM_STRICT)

# MD5 of an input file is skipped above this size unless forced...
MD5_MAX_SIZE = (1024 ** 2) * 512

LIST_PLACEHOLDER = ["", ""]

STR_SEP = " ------------------------------------------------------"

ARGS = None
