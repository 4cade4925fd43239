# -*- coding: UTF-8 -*-
"""
module version.py
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


major = "0"
minor = "3"
micro = "1"

maintainer = (("Keven L. Ates", "atescomp@gmail.com"), )
author     = ("Keven L. Ates", "atescomp@gmail.com")
location   = "https://github.com/AtesComp/Vinetto"
original_author = ("Michel Roukine", "rukin@users.sf.net")

STR_VERSION = major + "." + minor + "." + micro
