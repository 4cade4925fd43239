# -*- coding: UTF-8 -*-
"""
module imgcheck.py
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


from io import BytesIO

from PIL import Image, UnidentifiedImageError


def getImageSize(byteData):
    # Return (width, height) of an image payload or None if PIL can't read it...
    try:
        with Image.open(BytesIO(byteData)) as img:
            return img.size
    except (UnidentifiedImageError, OSError, ValueError):
        return None


def checkImageSize(byteData, iWidth, iHeight):
    # Return None when the payload matches the declared size,
    #   otherwise the real (width, height) or "unreadable"...
    tupleSize = getImageSize(byteData)
    if (tupleSize == None):
        return "unreadable"
    if (tupleSize == (iWidth, iHeight)):
        return None
    return tupleSize
