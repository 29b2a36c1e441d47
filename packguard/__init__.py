"""packguard: image asset policy checks for pack directories.

Layout:

- packguard/policy.py      fixed thresholds (ImagePolicy)
- packguard/fs.py          enumeration and per-path inspectors
- packguard/checks         image count, file size, extension checks
- packguard/pipeline.py    runs all checks and signals failures
- packguard/reporting      CI failure signal and summaries
"""

__version__ = "1.0.0"
