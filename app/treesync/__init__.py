"""treesync - working tree utilities for source synchronization.

Provides path matchers, filtered recursive file deletion and Gerrit
person/timestamp decoding.
"""

__version__ = "0.1.0"
