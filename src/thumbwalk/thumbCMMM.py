# -*- coding: UTF-8 -*-
"""
module thumbCMMM.py
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
from concurrent.futures import ThreadPoolExecutor

import thumbwalk.config as config
import thumbwalk.error as terror
import thumbwalk.cmmm as cmmm
import thumbwalk.walker as walker
import thumbwalk.signatures as signatures
import thumbwalk.tdb_streams as tdb_streams
import thumbwalk.imgcheck as imgcheck
import thumbwalk.utils as utils


def printHead(header):
    print("     Signature: %s" % config.THUMBS_FILE_TYPES[config.THUMBS_TYPE_CMMM])
    print("        Format: %d (%s)" % (header.version, header.format_name or "Unknown Format"))
    print("          Type: %d (%s)" % (header.cache_type, cmmm.getCacheFileName(header)))
    if (config.ARGS.verbose > 0):
        print("    Cache Info:")
        print("          Offset: %d" % header.first_entry_offset)
        print("   1st Available: %d" % header.available_entry_offset)
        print("         Unknown: %d" % header.unknown)
    return


def printCache(record, strExt):
    entry = record.entry
    print("     Signature: %s" % entry.magic.decode("ascii"))
    if (config.ARGS.verbose > 0):
        print("        Offset: %d" % record.offset)
        print("          Size: %d" % entry.entry_size)
        print("          Hash: %s" % utils.getHexHash(entry.hash))
        print("     Extension: %s" % strExt)
        print("       ID Size: %d" % entry.filename_length)
        print("      Pad Size: %d" % entry.padding_size)
        print("     Data Size: %d" % entry.data_size)
        print("  Image  Width: %d" % entry.width)
        print("  Image Height: %d" % entry.height)
        print(" Data Checksum: %016x" % entry.data_checksum)
        print(" Head Checksum: %016x" % entry.header_checksum)
        if (record.checksum_valid != None):
            print("     Checksums: %s" % ("Valid" if record.checksum_valid else "MISMATCH"))
    print("            ID: %s" % record.filename)
    return


def printWarning(err):
    if (config.ARGS.verbose >= 0):
        sys.stderr.write(" Warning: %s\n" % str(err))
    return


def writeThumb(strPath, byteData):
    # Write data to filename...
    try:
        with open(strPath, "wb") as fileImg:
            fileImg.write(byteData)
    except EnvironmentError:
        raise terror.OutputError(" Error (Output): Cannot write " + strPath)
    return strPath


def process(infile, byteBuffer):
    """
    Decode a CMMM thumbcache buffer, report each cache entry, and extract
    payloads when an output directory is set.

    Returns the finished EntryWalker so the caller can see how the walk
    ended.  Records decoded before a structural error are always reported
    and written.
    """
    tdbStreams = tdb_streams.TDB_Streams()
    tdbWalker = walker.EntryWalker(byteBuffer, config.ARGS.checksum)
    iWarned = 0

    executor = None
    listFutures = []
    if (config.ARGS.outdir != None and config.ARGS.jobs > 1):
        executor = ThreadPoolExecutor(max_workers=config.ARGS.jobs)

    try:
        iCacheCounter = 1
        for record in tdbWalker:
            if (iCacheCounter == 1):
                # Header decoded on the first step...
                reportHead(tdbWalker)

            # Report soft conditions as they appear...
            for err in tdbWalker.listWarnings[iWarned:]:
                printWarning(err)
            iWarned = len(tdbWalker.listWarnings)

            entry = record.entry
            strExt = signatures.getExtension(record.signature)

            if (config.ARGS.verbose >= 0):
                print(" Cache Entry %d\n --------------------" % iCacheCounter)
                printCache(record, strExt)

            if (record.signature == None):
                if (config.ARGS.verbose >= 0):
                    sys.stderr.write(" Warning: Cannot determine file type of entry %d: %s\n" %
                                     (iCacheCounter, utils.getHexSample(record.data)))
            elif (config.ARGS.imgcheck):
                resultSize = imgcheck.checkImageSize(record.data, entry.width, entry.height)
                if (resultSize != None and config.ARGS.verbose >= 0):
                    sys.stderr.write(" Warning: Entry %d image is %s, declared %dx%d\n" %
                                     (iCacheCounter,
                                      resultSize if isinstance(resultSize, str) else "%dx%d" % resultSize,
                                      entry.width, entry.height))
            if (config.ARGS.verbose > 1):
                sys.stderr.write(" Info: Entry %d classified as %s\n" %
                                 (iCacheCounter, record.signature.kind if record.signature else "unidentified"))

            strKey = utils.getHexHash(entry.hash)
            if (config.ARGS.outdir != None):
                strPath = os.path.join(config.ARGS.outdir, tdbStreams.getFileName(strKey, strExt))
                if (executor != None):
                    listFutures.append(executor.submit(writeThumb, strPath, record.data))
                else:
                    writeThumb(strPath, record.data)
            else:  # Not extracting...
                tdbStreams[strKey] = config.LIST_PLACEHOLDER

            iCacheCounter += 1
            if (config.ARGS.verbose >= 0):
                print(config.STR_SEP)

        if (executor != None):
            for future in listFutures:
                future.result()  # ...raises any OutputError
    finally:
        if (executor != None):
            executor.shutdown(wait=True)

    # Header only databases never entered the loop...
    if (tdbWalker.header != None and tdbWalker.iRecords == 0):
        reportHead(tdbWalker)
    for err in tdbWalker.listWarnings[iWarned:]:
        printWarning(err)

    if (tdbWalker.isDone() and config.ARGS.verbose > 1):
        sys.stderr.write(" Info: %s: end of cache entries at offset %d\n" % (infile, tdbWalker.iOffset))

    astrStats = tdbStreams.extractStats(config.ARGS.outdir)
    if (config.ARGS.verbose >= 0):
        print(" Summary:")
        if (astrStats != None):
            for strStat in astrStats:
                print("   " + strStat)
        else:
            print("   No Stats!")

    return tdbWalker


def reportHead(tdbWalker):
    if (config.ARGS.verbose >= 0):
        print(" Header\n --------------------")
        printHead(tdbWalker.header)
        print(config.STR_SEP)
    return
