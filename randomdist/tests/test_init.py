# Licensed under a 3-clause BSD style license - see LICENSE.rst
import randomdist


def test_version():
    assert isinstance(randomdist.__version__, str)


def test_main_module_doc():
    from randomdist import __main__

    assert "python -m randomdist gauss" in __main__.__doc__
