# -*- coding: UTF-8 -*-
"""
module signatures.py
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


from collections import namedtuple

import thumbwalk.config as config


Signature = namedtuple("Signature", ["kind", "ext", "header"])

# Detect data type ext by magic bytes...
#   ORDER MATTERS: the first matching row wins, so longer signatures of a
#   kind go before shorter ones sharing their leading bytes
SIGNATURES = (
        Signature( "JPEG", "jpg", b"\xFF\xD8\xFF\xD8" ),
        Signature( "JPEG", "jpg", b"\xFF\xD8\xFF\xEE" ),
        Signature( "JPEG", "jpg", b"\xFF\xD8\xFF\xE0\x00\x10\x4A\x46\x49\x46\x00\x01" ),  # ....JFIF..
        Signature( "BMP",  "bmp", b"\x42\x4D" ),                                          # BM
        Signature( "PNG",  "png", b"\x89\x50\x4E\x47\x0D\x0A\x1A\x0A" ),                  # .PNG\r\n\sub\n
        Signature( "GIF",  "gif", b"\x47\x49\x46\x38\x37\x61" ),                          # GIF87a
        Signature( "GIF",  "gif", b"\x47\x49\x46\x38\x39\x61" ),                          # GIF89a
    )


def classify(byteData):
    """
    Return the first Signature whose header starts byteData, or None.

    Only the first SNIFF_MAX_LENGTH bytes are examined.  Data shorter than a
    signature never matches it.
    """
    byteWindow = bytes(byteData[:config.SNIFF_MAX_LENGTH])
    for sig in SIGNATURES:
        if byteWindow.startswith(sig.header):
            return sig
    return None


def getExtension(sig):
    # Extension for an output file, neutral default when unidentified...
    if (sig == None):
        return config.UNKNOWN_EXT
    return sig.ext
