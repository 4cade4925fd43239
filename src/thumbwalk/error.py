# -*- coding: UTF-8 -*-
"""
module error.py
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
Thumbwalk Errors are categorized by the return exit codes.

See the ReadMe.md file for more.
"""

import sys


ERROR = " Error"

class ThumbwalkError(Exception):
    """
    Base class for exceptions in this module.
    """
    def __init__(self, *args):
        self.iExitCode = 1
        self.strErrHead = ERROR + ": "
        Exception.__init__(self, *args)

    def printError(self):
        sys.stderr.write(self.args[0] + "\n")


class InputError(ThumbwalkError):
    """
    Exception raised for errors regarding input processing.
    """
    def __init__(self, *args):
        ThumbwalkError.__init__(self, *args)
        self.iExitCode = 10
        self.strErrHead = ERROR + " (Input): "


class OutputError(ThumbwalkError):
    """
    Exception raised for errors regarding output processing.
    """
    def __init__(self, *args):
        ThumbwalkError.__init__(self, *args)
        self.iExitCode = 11
        self.strErrHead = ERROR + " (Output): "


class ProcessError(ThumbwalkError):
    """
    Exception raised for errors regarding file processing.
    """
    def __init__(self, *args):
        ThumbwalkError.__init__(self, *args)
        self.iExitCode = 12
        self.strErrHead = ERROR + " (Process): "


class ModeError(ThumbwalkError):
    """
    Exception raised for errors regarding the operating mode.
    """
    def __init__(self, *args):
        ThumbwalkError.__init__(self, *args)
        self.iExitCode = 16
        self.strErrHead = ERROR + " (Mode): "


###############################################################################
# Decode Errors
#   Raised by the CMMM decoder.  Each one knows the byte offset where the
#   structure broke and a short kind name for reports.
###############################################################################
class DecodeError(ThumbwalkError):
    """
    Exception raised for errors regarding database structure decoding.
    """
    strKind = "Decode"

    def __init__(self, strMessage, iOffset):
        ThumbwalkError.__init__(self, strMessage, iOffset)
        self.iExitCode = 20
        self.strErrHead = ERROR + " (" + self.strKind + "): "
        self.strMessage = strMessage
        self.iOffset = iOffset

    def __str__(self):
        return "%s at offset %d: %s" % (self.strKind, self.iOffset, self.strMessage)

    def printError(self):
        sys.stderr.write(self.strErrHead + str(self) + "\n")


class TooShortError(DecodeError):
    """
    Buffer ends before a fixed size region.
    """
    strKind = "TooShort"


class BadMagicError(DecodeError):
    """
    Header or entry signature is not "CMMM".
    """
    strKind = "BadMagic"


class UnknownCacheTypeError(DecodeError):
    """
    Header cache type is outside the known cache types.  Soft: the decoded
    header travels with the exception.
    """
    strKind = "UnknownCacheType"

    def __init__(self, strMessage, iOffset, header=None):
        DecodeError.__init__(self, strMessage, iOffset)
        self.header = header


class OffsetOutOfRangeError(DecodeError):
    """
    A computed region leaves the buffer or its offset overflows.
    """
    strKind = "OffsetOutOfRange"


class ZeroSizedEntryError(DecodeError):
    """
    Entry declares a zero size and would never advance.
    """
    strKind = "ZeroSizedEntry"


class MalformedFilenameError(DecodeError):
    """
    Entry filename length is not a whole number of UTF-16 code units.
    """
    strKind = "MalformedFilename"


class ChecksumMismatchError(DecodeError):
    """
    Stored entry checksum differs from the computed one.
    """
    strKind = "ChecksumMismatch"
