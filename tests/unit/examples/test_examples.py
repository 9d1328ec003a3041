"""
Copyright (c) 2019, The Decred developers
"""

import importlib.util
import os
from pathlib import Path
import py_compile
from tempfile import TemporaryDirectory

import megavolatility


def test_compile():
    exampleDir = Path(os.path.realpath(megavolatility.__file__)).parent.parent / "examples"

    with TemporaryDirectory() as tempDir:
        for filename in os.listdir(exampleDir):
            if not filename.endswith(".py"):
                continue
            path = os.path.join(exampleDir, filename)
            cfile = os.path.join(tempDir, filename + ".pyc")
            assert py_compile.compile(path, cfile=cfile) is not None
            spec = importlib.util.spec_from_file_location(filename.split(".")[0], path)
            m = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(m)


def test_detect_network(registry):
    path = Path(megavolatility.__file__).resolve().parent.parent / "examples" / "detect_network.py"
    spec = importlib.util.spec_from_file_location("detect_network", path)
    m = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(m)

    assert m.detect(registry, "mrX9vMRYLfVy1BnZbc5gZjuyaqH3ZW2ZHz") == (
        registry.testnet,
        "P2PKH address",
    )
    assert m.detect(registry, "3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyC") == (
        registry.livenet,
        "P2SH address",
    )
    assert m.detect(
        registry, "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
    ) == (registry.livenet, "WIF private key")
