"""Report the porterstem installation and the stemming algorithm variant it implements
(useful for bug-reporting, and for checking that two installations produce the same stems).

Examples
--------
You can use it through python

>>> from porterstem.scripts.package_info import package_info
>>>
>>> info = package_info()
>>> info["Algorithm"]
'Porter 1980 + ANSI C reference departures (bli->ble, logi->log, words of <= 2 letters kept)'

or using CLI interface

::

    python -m porterstem.scripts.package_info --info

"""
import argparse
import platform
import sys
import os

import smart_open

import porterstem
from porterstem.parsing import porter

ALGORITHM = 'Porter 1980 + ANSI C reference departures (bli->ble, logi->log, words of <= 2 letters kept)'


def rule_counts():
    """Get the number of suffix rules in each table-driven step of the stemmer.

    Returns
    -------
    dict of (str, int)

    """
    return {
        "step2": len(porter.STEP2_RULES),
        "step3": len(porter.STEP3_RULES),
        "step4": len(porter.STEP4_RULES),
    }


def package_info():
    """Get the porterstem version and algorithm variant, the versions of its dependencies,
    the location where porterstem is installed and platform on which the system is running.

    Returns
    -------
    dict of (str, str)
        Dictionary containing the algorithm variant, rule table sizes, the versions of porterstem,
        Python and smart_open, and platform information.

    """
    return {
        "Algorithm": ALGORITHM,
        "Rules": ", ".join("%s=%i" % item for item in sorted(rule_counts().items())),
        "Platform": platform.platform(),
        "Python": sys.version.replace("\n", ', '),
        "smart_open": smart_open.__version__,
        "porterstem": porterstem.__version__,
        "Location": os.path.abspath(os.path.dirname(porterstem.__file__)),
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Report porterstem installation and algorithm information",
    )
    parser.add_argument("--info", help="Information about porterstem package", action="store_true")
    args = parser.parse_args()

    if args.info:
        print("porterstem installation information\n")
        for (k, v) in sorted(package_info().items()):
            print("{}: {}".format(k, v))
