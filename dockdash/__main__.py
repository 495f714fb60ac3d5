import sys

from dockdash.outputs.standalone import DockdashStandalone

if __name__ == "__main__":
    sys.exit(0 if DockdashStandalone().run() else 1)
