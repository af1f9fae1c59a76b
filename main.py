#!/usr/bin/env python3
"""PomoTasks — entry point.

Run with:
    python main.py [focus|short-break|long-break]
    python -m pomotasks
"""

from pomotasks.__main__ import main


if __name__ == "__main__":
    main()
