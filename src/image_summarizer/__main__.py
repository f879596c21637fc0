"""Allow ``python -m image_summarizer``."""

from image_summarizer.cli import main

raise SystemExit(main())
