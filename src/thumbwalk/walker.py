# -*- coding: UTF-8 -*-
"""
module walker.py
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


from collections import namedtuple

import thumbwalk.config as config
import thumbwalk.error as terror
import thumbwalk.cmmm as cmmm
import thumbwalk.signatures as signatures
import thumbwalk.utils as utils


STATE_START      = "Start"
STATE_DECODING   = "Decoding"
STATE_EXTRACTING = "Extracting"
STATE_DONE       = "Done"
STATE_FAILED     = "Failed"

DecodedRecord = namedtuple("DecodedRecord",
                           ["offset", "entry", "filename", "data", "signature", "checksum_valid"])


###############################################################################
# Thumbwalk Entry Walker Class
#   Follows the entry chain forward from the header's first entry offset.
#   Each entry's size gives the next offset; there is no index.
###############################################################################
class EntryWalker():
    def __init__(self, byteBuffer, strChecksumMode = config.CHECKSUM_OFF):
        # Initialize a new EntryWalker instance...
        if (strChecksumMode not in config.CHECKSUM_MODES):
            raise ValueError("Unknown checksum mode: %s" % strChecksumMode)
        self.byteBuffer = byteBuffer
        self.strChecksumMode = strChecksumMode
        self.state = STATE_START
        self.iOffset = None
        self.header = None
        self.error = None
        self.listWarnings = []
        self.iRecords = 0


    def __iter__(self):
        return self.walk()


    def isDone(self):
        return (self.state == STATE_DONE)


    def isFailed(self):
        return (self.state == STATE_FAILED)


    def __fail(self, err):
        self.error = err
        self.state = STATE_FAILED
        return


    def walk(self):
        # Yield a DecodedRecord per entry until the sentinel, the end of the
        # buffer, or a structural error...
        if (self.state != STATE_START):
            raise RuntimeError("EntryWalker can only walk once")

        try:
            self.header = cmmm.decodeHeader(self.byteBuffer)
        except terror.UnknownCacheTypeError as e:
            self.header = e.header
            self.listWarnings.append(e)
        except terror.DecodeError as e:
            self.__fail(e)
            return

        iLength = len(self.byteBuffer)
        self.iOffset = self.header.first_entry_offset

        while (True):
            self.state = STATE_DECODING
            if (self.iOffset >= iLength):
                break

            try:
                record = self.__decodeRecord(self.iOffset, iLength)
            except terror.DecodeError as e:
                self.__fail(e)
                return

            if (record == None):  # ...zero data sentinel, end of chain
                break

            self.iRecords += 1
            yield record

            self.iOffset = record.offset + record.entry.entry_size

        self.state = STATE_DONE
        return


    def __decodeRecord(self, iOffset, iLength):
        entry = cmmm.decodeEntry(self.byteBuffer, iOffset)

        # Compute filename, padding, and data regions...
        iNameStart = utils.addOffset(iOffset, config.TC_ENTRY_SIZE, iOffset)
        iNameEnd   = utils.addOffset(iNameStart, entry.filename_length, iOffset)
        utils.checkRegion("Filename", iNameStart, iNameEnd, iLength, iOffset)
        iDataStart = utils.addOffset(iNameEnd, entry.padding_size, iOffset)
        utils.checkRegion("Padding", iNameEnd, iDataStart, iLength, iOffset)
        iDataEnd   = utils.addOffset(iDataStart, entry.data_size, iOffset)
        utils.checkRegion("Data", iDataStart, iDataEnd, iLength, iOffset)
        if (iDataEnd - iOffset > entry.entry_size):
            raise terror.OffsetOutOfRangeError("Entry size %d smaller than its %d bytes of regions" %
                                               (entry.entry_size, iDataEnd - iOffset), iOffset)

        self.state = STATE_EXTRACTING
        if (entry.data_size == 0):
            return None

        byteData = self.byteBuffer[iDataStart:iDataEnd]

        bChecksumValid = None
        if (self.strChecksumMode != config.CHECKSUM_OFF):
            try:
                cmmm.verifyChecksums(self.byteBuffer, iOffset, entry, byteData)
                bChecksumValid = True
            except terror.ChecksumMismatchError as e:
                if (self.strChecksumMode == config.CHECKSUM_STRICT):
                    raise
                self.listWarnings.append(e)
                bChecksumValid = False

        return DecodedRecord(iOffset, entry,
                             utils.decodeBytes(self.byteBuffer[iNameStart:iNameEnd]),
                             byteData, signatures.classify(byteData), bChecksumValid)


def decodeDatabase(byteBuffer, strChecksumMode = config.CHECKSUM_OFF):
    # Walk the whole buffer, returning ( [DecodedRecord, ...], EntryWalker )...
    #   A failed walk still returns every record decoded before the failure
    tdbWalker = EntryWalker(byteBuffer, strChecksumMode)
    listRecords = list(tdbWalker)
    return (listRecords, tdbWalker)
