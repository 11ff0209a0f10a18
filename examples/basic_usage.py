#!/usr/bin/env python3
"""
Basic SmartClone usage example.

Resolves a keyword against a GitHub account's public repositories and
shows what would be cloned, without cloning anything.
Run with: python examples/basic_usage.py [username] [keyword]
"""

import sys

from smartclone import NoMatchesError, RepositoryIndex, SmartCloneError
from smartclone.matcher import match_records
from smartclone.types import Credentials

username = sys.argv[1] if len(sys.argv) > 1 else "octocat"
keyword = sys.argv[2] if len(sys.argv) > 2 else "hello"

print("=== SmartClone Basic Usage Example ===\n")

# 1. Fetch the repository index (anonymous, public repositories only)
print(f"1. Fetching repositories of {username}...")
try:
    records = RepositoryIndex().fetch(Credentials(username=username))
except SmartCloneError as e:
    print(f"   Caught {type(e).__name__}: {e.message} (code {e.code})")
    sys.exit(1)
print(f"   {len(records)} repositories\n")

# 2. Match the keyword
print(f"2. Matching '{keyword}'...")
match_set = match_records(keyword, records)
print(f"   Tier: {match_set.tier.value}")
for position, record in enumerate(match_set, start=1):
    print(f"   {position}) {record.name} -> {record.clone_url}")

if not match_set:
    error = NoMatchesError(keyword, [record.name for record in records][:10])
    print(f"\n   {error.message}")
    print(f"   Available: {', '.join(error.available)}")
