#!/usr/bin/env python3
"""StudyGoal — entry point.

Run with:
    python main.py goal --minutes 90
    python -m studygoal sequence Math:25 History:30
"""

from studygoal.__main__ import main


if __name__ == "__main__":
    main()
