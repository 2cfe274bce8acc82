"""API wrapper for members of the U.S. Congress (ProPublica Congress API)."""

from __future__ import annotations
from dataclasses import dataclass
from string import Formatter
from typing import Any, List, Optional, Tuple, Type

from .decoder import Unwrap, decode
from .models import Member, MemberDetail, MemberSearchResult, Record, TransitionRecord
from .transport import Transport


@dataclass(frozen=True)
class Endpoint:
    """Describes one API call: where it lives and how to read its response."""
    name: str
    path: str
    strategy: Unwrap
    record_type: Type[Record]
    group_key: str = "members"

    @property
    def parameters(self) -> Tuple[str, ...]:
        return tuple(name for _, name, _, _ in Formatter().parse(self.path) if name)

    def render(self, **params: Any) -> str:
        """
        Fill the path template. Values are inserted verbatim; only their
        presence is checked.

        Raises:
            ValueError: if a template parameter is missing, None or empty
        """
        for name in self.parameters:
            value = params.get(name)
            if value is None or value == "":
                raise ValueError(f"{self.name}: missing required parameter '{name}'")
        return self.path.format(**params)


MEMBERS = Endpoint("members", "/{congress}/{chamber}/members.json", Unwrap.FIRST_GROUP, Member)
MEMBER = Endpoint("member", "/members/{member_id}.json", Unwrap.FIRST_GROUP_SINGLE, MemberDetail)
MEMBERS_BY_STATE = Endpoint(
    "members_by_state", "/members/{chamber}/{state}/current.json", Unwrap.DIRECT, MemberSearchResult
)
MEMBERS_BY_DISTRICT = Endpoint(
    "members_by_district",
    "/members/{chamber}/{state}/{district}/current.json",
    Unwrap.DIRECT,
    MemberSearchResult,
)
NEW_MEMBERS = Endpoint("new_members", "/members/new.json", Unwrap.FIRST_GROUP, TransitionRecord)
DEPARTING_MEMBERS = Endpoint(
    "departing_members", "/{congress}/{chamber}/members/leaving.json", Unwrap.ALL_GROUPS, TransitionRecord
)

ENDPOINTS = {
    endpoint.name: endpoint
    for endpoint in (MEMBERS, MEMBER, MEMBERS_BY_STATE, MEMBERS_BY_DISTRICT, NEW_MEMBERS, DEPARTING_MEMBERS)
}


def execute(transport: Transport, endpoint: Endpoint, **params: Any) -> List[Record]:
    """
    Run one endpoint: render its path, fetch it and decode the results.

    Raises:
        ValueError: if a path parameter is missing
        TransportError: if the request fails (nothing is decoded)
        DecodeError: if the body is not a well-formed envelope
    """
    path = endpoint.render(**params)
    body = transport.get(path)
    return decode(body, endpoint.strategy, endpoint.record_type, endpoint.group_key)


def get_members(transport: Transport, congress: int, chamber: str) -> List[Member]:
    """
    Fetch every member of one chamber in one Congress.

    Args:
        congress: Congress number (e.g. 115)
        chamber: 'house' or 'senate' (passed through as given)
    """
    return execute(transport, MEMBERS, congress=congress, chamber=chamber)


def get_member(transport: Transport, member_id: str) -> Optional[MemberDetail]:
    """Fetch the full record for one member, or None if the API returned nothing."""
    results = execute(transport, MEMBER, member_id=member_id)
    return results[0] if results else None


def get_members_by_state(transport: Transport, chamber: str, state: str) -> List[MemberSearchResult]:
    """Fetch current members of one chamber for a state (two-letter code)."""
    return execute(transport, MEMBERS_BY_STATE, chamber=chamber, state=state)


def get_members_by_district(
    transport: Transport,
    chamber: str,
    state: str,
    district: int
) -> List[MemberSearchResult]:
    """Fetch the current member(s) for a congressional district."""
    return execute(transport, MEMBERS_BY_DISTRICT, chamber=chamber, state=state, district=district)


def get_new_members(transport: Transport) -> List[TransitionRecord]:
    return execute(transport, NEW_MEMBERS)


def get_departing_members(transport: Transport, congress: int, chamber: str) -> List[TransitionRecord]:
    """Fetch members leaving office, concatenated across every chamber group returned."""
    return execute(transport, DEPARTING_MEMBERS, congress=congress, chamber=chamber)


def get_members_by_state_both_chambers(transport: Transport, state: str) -> List[MemberSearchResult]:
    """
    Fetch a state's current House members followed by its senators.

    Either call failing fails the whole lookup; no partial list is returned.
    """
    house = get_members_by_state(transport, "house", state)
    senate = get_members_by_state(transport, "senate", state)
    return house + senate
