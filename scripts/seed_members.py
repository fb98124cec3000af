#!/usr/bin/env python3
"""
Seed the teams and members tables with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Always includes the four reference members (member1..member4) first
- Some members have no team and some have no username, to exercise
  left joins and null ordering

Usage:
    python scripts/seed_members.py
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from member_search.infra.db.models.member import MemberRow, TeamRow
from member_search.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_EXTRA_MEMBERS = 96

TEAM_NAMES = ["teamA", "teamB", "teamC", "teamD"]

# (username, age, team index) - the reference fixture
REFERENCE_MEMBERS = [
    ("member1", 10, 0),
    ("member2", 20, 0),
    ("member3", 30, 1),
    ("member4", 40, 1),
]

TEAMLESS_RATIO = 0.1
ANONYMOUS_RATIO = 0.05


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_member(index: int, teams: list[TeamRow]) -> MemberRow:
    """Generate a single random member."""
    username = None if random.random() < ANONYMOUS_RATIO else f"member{index}"
    team = None if random.random() < TEAMLESS_RATIO else random.choice(teams)

    # Ages weighted toward 20-40
    age = random.choices(
        [random.randint(10, 19), random.randint(20, 40), random.randint(41, 80)],
        weights=[2, 5, 2],
        k=1,
    )[0]

    return MemberRow(username=username, age=age, team=team)


def seed_members(num_extra: int = NUM_EXTRA_MEMBERS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with the reference members plus random ones.

    Args:
        num_extra: Number of random members added after the reference ones
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {len(REFERENCE_MEMBERS) + num_extra} members (seed={seed})...")

    with get_session() as session:
        print("🗑️  Clearing existing members and teams...")
        deleted_members = session.query(MemberRow).delete()
        deleted_teams = session.query(TeamRow).delete()
        print(f"   Deleted {deleted_members} members and {deleted_teams} teams")

        teams = [TeamRow(name=name) for name in TEAM_NAMES]
        session.add_all(teams)

        members = [
            MemberRow(username=username, age=age, team=teams[team_index])
            for username, age, team_index in REFERENCE_MEMBERS
        ]
        start = len(REFERENCE_MEMBERS) + 1
        members += [generate_member(i, teams) for i in range(start, start + num_extra)]

        session.add_all(members)
        session.flush()

        print(f"✅ Successfully seeded {len(teams)} teams and {len(members)} members!")

        print("\n📊 Sample members:")
        for member in members[:5]:
            team_name = member.team.name if member.team else "-"
            print(f"   {member.id}. {member.username} ({member.age}) {team_name}")

        if len(members) > 5:
            print(f"   ... and {len(members) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_members()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
