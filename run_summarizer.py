"""
run_summarizer.py: CLI entry point

Forwards execution to the CLI defined in `src/image_summarizer/cli.py`
so the tool can be run from a checkout without installing it.

Usage:
    python run_summarizer.py -dir path/to/images [-out output.png] [-n 3] [-tile 300]

For help on available options, run:
    python run_summarizer.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import image_summarizer.cli as is_cli

if __name__ == "__main__":
    raise SystemExit(is_cli.main())
