import argparse
import os
import sys

import pytest

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(os.path.dirname(TESTS_DIR), "src"))
sys.path.insert(0, TESTS_DIR)

import thumbwalk.config as config


@pytest.fixture
def args(tmp_path):
    """Install a default command line namespace in config.ARGS."""
    saved = config.ARGS
    config.ARGS = argparse.Namespace(
        infile=None, mode="f", outdir=None, jobs=1, checksum=config.CHECKSUM_OFF,
        imgcheck=False, md5force=False, md5never=False, quiet=False, verbose=0,
    )
    yield config.ARGS
    config.ARGS = saved
