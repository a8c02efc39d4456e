"""Alert - sweeping colored edge, tunable live with setVars.

Usage: python apps/alert.py [pixel_count]
Then from another shell:
  echo '{"setVars": {"hue": 0.66, "speed": 0.01}}' | nc -u -w0 127.0.0.1 7778
"""

import sys

from ledpattern import AlertPattern, config, run


if __name__ == "__main__":
    pixel_count = int(sys.argv[1]) if len(sys.argv) > 1 else config.PIXEL_COUNT
    run(AlertPattern(pixel_count), title="Alert")
