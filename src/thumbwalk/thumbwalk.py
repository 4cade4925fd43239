# -*- coding: UTF-8 -*-
"""
module thumbwalk.py
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
import argparse

import thumbwalk.version as version
import thumbwalk.config as config
import thumbwalk.error as terror
import thumbwalk.processor as processor


def getArgs(argv = None):
    # Return arguments passed to thumbwalk on the command line...

    strProg = "Thumbwalk"
    strDesc = strProg + " - The Thumbcache Database Walker"
    strNote = (
        "Operating Mode Notes:\n" +
        "  Using the mode switch (-m, --mode) causes the input to be treated differently\n" +
        "  based on the mode selected\n" +
        "  File      (f): DEFAULT\n" +
        "    Use the input as a location to an individual thumbcache file to process\n" +
        "  Directory (d):\n" +
        "    Use the input as a directory containing thumbcache_*.db files where\n" +
        "    each file is automatically iterated for processing\n" +
        "  Recursive (r):\n" +
        "    Use the input as a BASE directory from which it and subdirectories are\n" +
        "    recursively searched for thumbcache_*.db files for processing\n" +
        "\n" +
        "Checksum Mode Notes:\n" +
        "  off     entry checksums are not examined (default)\n" +
        "  warn    mismatches are reported and decoding continues\n" +
        "  strict  a mismatch stops decoding at that entry\n" +
        "\n" +
        "Verbose Mode Notes:\n" +
        "    Level:   Mode:    Switch:   Output:\n"
        "     -1      Quiet     -q       Errors\n" +
        "      0      Standard  N/A      output + Errors + Warnings\n" +
        "      1      Verbose   -v       Standard + Extended + Info\n" +
        "      2      Enhanced  -vv      Verbose + Classification + End of chain\n" +
        "\n"
        )
    strEpilog = (
        "--- " + strProg + " " + version.STR_VERSION + " ---\n" +
        "Based on Vinetto by " + version.original_author[0] + " and " + version.author[0] + "\n" +
        strProg + " is open source software\n" +
        "  See: " + version.location
        )
    strNotVerbose = "\nFor more detailed help notes, use -v"

    parser = argparse.ArgumentParser(prog="thumbwalk", formatter_class=argparse.RawTextHelpFormatter,
                                     description=strDesc, epilog=strEpilog + strNotVerbose, add_help=False)
    parser.add_argument("-h", "-?", "--help", action="store_true", dest="arg_help",
                        help=("show this help message and exit, use -v for more details"))
    parser.add_argument("-c", "--checksum", dest="checksum", choices=config.CHECKSUM_MODES,
                        default=config.CHECKSUM_OFF,
                        help=("entry checksum verification: \"off\", \"warn\", or \"strict\""))
    parser.add_argument("-i", "--imgcheck", action="store_true", dest="imgcheck",
                        help=("compare each identified image's real size with the\n" +
                              "width and height recorded in its cache entry"))
    parser.add_argument("-j", "--jobs", type=int, dest="jobs", default=1, metavar="N",
                        help=("write extracted thumbnails with N threads (requires option -o)"))
    parser.add_argument("-m", "--mode", nargs="?", dest="mode", choices=["f", "d", "r"],
                        default="f", const="f",
                        help=("operating mode: \"f\", \"d\", or \"r\"\n" +
                              "  where \"f\" indicates single file processing (default)\n" +
                              "        \"d\" indicates directory processing\n" +
                              "        \"r\" indicates recursive directory processing from a\n" +
                              "              starting directory"))
    parser.add_argument("--md5", action="store_true", dest="md5force",
                        help=("force the MD5 hash value calculation for an input file\n" +
                              "Normally, the MD5 is calculated when a file is less than\n" +
                              "0.5 GiB in size\n" +
                              "NOTE: --nomd5 overrides --md5"))
    parser.add_argument("--nomd5", action="store_true", dest="md5never",
                        help=("skip the MD5 hash value calculation for an input file"))
    parser.add_argument("-o", "--outdir", dest="outdir", metavar="DIR",
                        help=("write thumbnails to DIR, named by entry hash"))
    parser.add_argument("-q", "--quiet", action="store_true", dest="quiet",
                        help=("quiet output: Errors only\n" +
                              "NOTE: -v overrides -q"))
    parser.add_argument("-v", '--verbose', action='count', default=0,
                        help=("verbose output, each use increments output level: 0 (Standard)\n" +
                              "1 (Verbose), 2 (Enhanced)"))
    parser.add_argument("--version", action="version", version=strEpilog)
    parser.add_argument("infile", nargs="?",
                        help=("depending on operating mode (see mode option), either a location\n" +
                              "to a thumbcache file (\"thumbcache_256.db\" or similar) or a directory"))
    pargs = parser.parse_args(argv)

    if (pargs.arg_help):
        if (pargs.verbose > 0):
            parser.epilog = strNote + strEpilog
        parser.print_help()
        parser.exit(0)

    if (pargs.infile == None):
        parser.error("No input file or directory specified")

    if (pargs.jobs < 1):
        parser.error("-j option requires at least 1 job")
    if (pargs.jobs > 1 and pargs.outdir == None):
        parser.error("-j option requires -o with a directory name")

    if (pargs.mode == None):
        parser.error("Operating mode must be specified")

    return (pargs)


# ================================================================================
#
# MAIN Support Functions
#
# ================================================================================

def testInput():
    strError = " Error (Input): "

    # Test Input File parameter...
    if not os.path.exists(config.ARGS.infile):  # ...NOT exists?
        raise terror.InputError(strError + config.ARGS.infile + " does not exist")
    if (config.ARGS.mode == "f"):  # Traditional Mode...
        if not os.path.isfile(config.ARGS.infile):  # ...NOT a file?
            raise terror.InputError(strError + config.ARGS.infile + " not a file")
    else:  # Directory or Recursive Directory Mode...
        if not os.path.isdir(config.ARGS.infile):  # ...NOT a directory?
            raise terror.InputError(strError + config.ARGS.infile + " not a directory")

    if not os.access(config.ARGS.infile, os.R_OK):  # ...NOT readable?
        raise terror.InputError(strError + config.ARGS.infile + " not readable")
    return


def testOutput():
    strError = " Error (Output): "

    # Test Output Directory parameter...
    if (config.ARGS.outdir != None):
        if not os.path.exists(config.ARGS.outdir):  # ...NOT exists?
            try:
                os.makedirs(config.ARGS.outdir)  # ...make it
                if (config.ARGS.verbose > 0):
                    sys.stderr.write(" Info: %s was created\n" % (config.ARGS.outdir))
            except EnvironmentError:
                raise terror.OutputError(strError + "Cannot create " + config.ARGS.outdir)
        else:  # ...exists...
            if not os.path.isdir(config.ARGS.outdir):  # ...NOT a directory?
                raise terror.OutputError(strError + config.ARGS.outdir + " is not a directory")
            elif not os.access(config.ARGS.outdir, os.W_OK):  # ...NOT writable?
                raise terror.OutputError(strError + config.ARGS.outdir + " not writable")
    return


# ================================================================================
#
# MAIN
#
# ================================================================================

def main(argv = None):
    config.ARGS = getArgs(argv)

    # Unify QUIET and VERBOSE modes...
    if (config.ARGS.quiet):
        if (config.ARGS.verbose > 0):
            config.ARGS.quiet = False  # ..turn off quiet
        else:
            config.ARGS.verbose = -1  # ...store quiet as a verbose setting

    if (config.ARGS.verbose >= 0):
        sys.stdout.write( "Thumbwalk: Version {}\n".format(version.STR_VERSION) )

    # Correct MD5 mode...
    if (config.ARGS.md5force) and (config.ARGS.md5never):
        config.ARGS.md5force = False

    try:
        testInput()

        testOutput()

        # Process
        # ============================================================
        tProcessor = processor.Processor()
        if (config.ARGS.mode == "f"):  # Traditional Mode
            tProcessor.processThumbFile(config.ARGS.infile)
        elif (config.ARGS.mode == "d"):  # Directory Mode
            tProcessor.processDirectory(config.ARGS.infile)
        elif (config.ARGS.mode == "r"):  # Recursive Directory Mode
            tProcessor.processRecursiveDirectory(config.ARGS.infile)
        else:  # Unknown Mode - should never occur
            raise terror.ModeError(" Error (Mode): Unknown mode (" + config.ARGS.mode + ") to process " + config.ARGS.infile)
    except terror.ThumbwalkError as te:
        te.printError()
        sys.exit(te.iExitCode)

    return 0


if __name__ == "__main__":
    main()
