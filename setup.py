import os
from setuptools import setup
from src.thumbwalk import version

# Utility function to read the ReadMe.md file...
#   Used for the long_description.  It's nice, because now:
#     1) we have a top level ReadMe.md file and
#     2) it's easier to type in the ReadMe.md file than to put a raw string in below
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as fileRead:
        return fileRead.read()


setup(
  # METADATA...
  name = 'thumbwalk',
  version = version.STR_VERSION,
  url = version.location,
  author = version.author[0],
  author_email = version.author[1],
  maintainer = version.maintainer[0][0],
  maintainer_email = version.maintainer[0][1],
  description = 'Thumbwalk: The Thumbcache Database Walker',
  license = 'GNU GPLv3',
  long_description = read('ReadMe.md'),
  long_description_content_type = 'text/markdown',
  platforms = ['LINUX', 'MAC', 'WINDOWS'],
  # OPTIONS...
  python_requires = '>=3.6',
  install_requires = ['Pillow'],
  extras_require = {'test': ['pytest']},
  entry_points = {'console_scripts': ['thumbwalk=thumbwalk.thumbwalk:main']},
  include_package_data = True,
  packages = ['thumbwalk'],
  package_dir = {'thumbwalk': 'src/thumbwalk'},
)
