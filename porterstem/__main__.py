import argparse

from porterstem.scripts.package_info import package_info

parser = argparse.ArgumentParser()
parser.add_argument("--info", action="store_true", help="Display version of porterstem and its dependencies")
opt = parser.parse_args()

if opt.info:
    info = package_info()
    print("\nporterstem ", info["porterstem"], " from ", info["Location"], "\n")
    print("Algorithm \t", info["Algorithm"], "\n")
    print("Rules \t\t", info["Rules"], "\n")
    print("python ", info["Python"], "\n\n")
    print("Platform \t", info["Platform"], "\n")
    print("smart_open \t", info["smart_open"], "\n")
else:
    parser.print_help()
