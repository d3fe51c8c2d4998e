"""Random operation sequences must never break the membership invariants."""
import random
from collections import Counter

import pytest

from committee_system.core.constants import MAX_SUBCOMMITTEES_PER_MEMBER
from committee_system.core.enums import SubcommitteeName
from committee_system.core.exceptions import DomainError


@pytest.mark.parametrize("seed", range(8))
def test_random_adds_and_removes(container, make_member, store, sub_ids, seed):
    rng = random.Random(seed)
    members = [make_member(candidate=rng.random() < 0.5) for _ in range(8)]
    names = [n.value for n in SubcommitteeName]
    svc = container.subcommittee_service

    for _ in range(120):
        m = rng.choice(members)
        sub = rng.choice(names)
        try:
            if rng.random() < 0.7:
                svc.add_member(subcommittee_name=sub, member_id=m.member_id, member_type=m.member_type)
            else:
                svc.remove_member(subcommittee_id=sub_ids[sub], member_id=m.member_id)
        except DomainError:
            pass

        per_member = Counter(x.member_id for x in store.memberships)
        assert max(per_member.values(), default=0) <= MAX_SUBCOMMITTEES_PER_MEMBER

        pairs = Counter((x.member_id, x.subcommittee_id) for x in store.memberships)
        assert max(pairs.values(), default=0) <= 1

        conveners = [x for x in store.memberships if x.is_convener]
        assert len({x.subcommittee_id for x in conveners}) == len(conveners)
        assert len({x.member_id for x in conveners}) == len(conveners)

        by_id = {x.member_id: x for x in members}
        assert all(by_id[x.member_id].is_convener for x in conveners)
