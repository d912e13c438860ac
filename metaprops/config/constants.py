"""
Constants used throughout metaprops
"""

import textwrap

VERSION = "1.0.0"

# Rendering
INDENT = "   "
FIELD_WIDTH = 45

# Command-line flag tokens, compared case-insensitively
FLAG_TOKENS = ('-h', '-?', '-l', '-c', '-b', '-k', '-f')

# Names of the rows synthesized from ISO base media container headers
ISOM_BRAND = "Isom.Brand"
ISOM_CREATION_TIME = "Isom.CreationTime"
ISOM_MODIFICATION_TIME = "Isom.ModificationTime"

SUPPORTED_EXTENSIONS = {
    'images': ['.jpg', '.jpeg', '.png', '.tif', '.tiff', '.gif', '.bmp', '.webp'],
    'documents': ['.pdf'],
    'audio': ['.mp3', '.wav', '.flac', '.m4a', '.ogg', '.opus', '.aac', '.wma', '.aiff'],
    'video': ['.mp4', '.m4v', '.mov', '.3gp', '.3g2', '.wmv'],
}

# Environment variables read by load_settings()
ENV_DEBUG = "METAPROPS_DEBUG"
ENV_LOG_FILE = "METAPROPS_LOG_FILE"

DESCRIPTION = f"metaprops v{VERSION}\nLists all metadata properties on a file."

EPILOG = textwrap.dedent('''
    Filenames:
      One or more filenames must be specified. Wildcards may be included;
      they match files in a single directory only.

    Examples:
      metaprops photo.jpg
      metaprops -c -f *.mp4
      metaprops -b -k -f "C:\\Music\\*.mp3"

    Environment:
      METAPROPS_DEBUG=1      show full diagnostic detail for errors
      METAPROPS_LOG_FILE=F   write a debug log to file F

    Source code available under BSD 3-Clause License (see -l).
    ''').strip()

LICENSE_TEXT = textwrap.dedent('''
    BSD 3-Clause License

    Copyright (c) 2018, Brandt Redd
    All rights reserved.

    Redistribution and use in source and binary forms, with or without
    modification, are permitted provided that the following conditions are met:

    * Redistributions of source code must retain the above copyright notice, this
      list of conditions and the following disclaimer.

    * Redistributions in binary form must reproduce the above copyright notice,
      this list of conditions and the following disclaimer in the documentation
      and/or other materials provided with the distribution.

    * Neither the name of the copyright holder nor the names of its
      contributors may be used to endorse or promote products derived from
      this software without specific prior written permission.

    THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
    AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
    IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
    DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
    FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
    DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
    SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
    CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
    OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
    OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
    ''').strip()
