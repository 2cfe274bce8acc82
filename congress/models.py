"""Data models for members of Congress as returned by the API."""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Mapping, Optional

from .errors import DecodeError


# ---------------------------------------------------------------------------
# Lenient value normalizers
#
# The API is inconsistent about types (e.g. "seniority": "12" in one response
# and 12 in another). Each normalizer accepts every representation seen in
# the wild and returns None for anything it cannot interpret.
# ---------------------------------------------------------------------------

def to_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, str)):
        try:
            return float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            return None
    return None


def to_flag(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value) if value in (0, 1) else None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no"):
            return False
    return None


def _text(key: Optional[str] = None):
    return field(default=None, metadata={"decode": to_str, "key": key})


def _int(key: Optional[str] = None):
    return field(default=None, metadata={"decode": to_int, "key": key})


def _float(key: Optional[str] = None):
    return field(default=None, metadata={"decode": to_float, "key": key})


def _flag(key: Optional[str] = None):
    return field(default=None, metadata={"decode": to_flag, "key": key})


def _records(record_type: type, key: Optional[str] = None):
    def decode(value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [record_type.from_dict(item) for item in value]

    return field(default_factory=list, metadata={"decode": decode, "key": key})


# ---------------------------------------------------------------------------
# Base record and shared field groups
# ---------------------------------------------------------------------------

@dataclass
class Record:
    """Common decoding behaviour. `raw` keeps the untouched API mapping."""
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """
        Build a record from one JSON object.

        Missing keys become None (or [] for nested lists); unknown keys are
        ignored but remain available on `raw`.

        Raises:
            DecodeError: if `data` is not a JSON object
        """
        if not isinstance(data, Mapping):
            raise DecodeError(
                f"{cls.__name__} entry must be a JSON object, got {type(data).__name__}"
            )

        values: Dict[str, Any] = {}
        for f in fields(cls):
            decode: Optional[Callable[[Any], Any]] = f.metadata.get("decode")
            if decode is None:
                continue
            value = data.get(f.metadata.get("key") or f.name)
            if value is None:
                continue
            values[f.name] = decode(value)

        return cls(raw=dict(data), **values)

    def to_dict(self) -> Dict[str, Any]:
        """Normalized fields as a plain dict (nested records included, `raw` omitted)."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "raw":
                continue
            value = getattr(self, f.name)
            if isinstance(value, list):
                value = [item.to_dict() if isinstance(item, Record) else item for item in value]
            result[f.name] = value
        return result


@dataclass
class Identity(Record):
    id: Optional[str] = _text()
    api_uri: Optional[str] = _text()
    first_name: Optional[str] = _text()
    middle_name: Optional[str] = _text()
    last_name: Optional[str] = _text()
    suffix: Optional[str] = _text()


@dataclass
class TrackingIds(Record):
    """Identifiers for the member in other data sources."""
    govtrack_id: Optional[str] = _text()
    cspan_id: Optional[str] = _text()
    votesmart_id: Optional[str] = _text()
    # Inter-university Consortium for Political and Social Research
    icpsr_id: Optional[str] = _text()
    # Center for Responsive Politics (OpenSecrets.org)
    crp_id: Optional[str] = _text()
    google_entity_id: Optional[str] = _text()
    fec_candidate_id: Optional[str] = _text()
    ocd_id: Optional[str] = _text()
    # Senate Legislative Information System
    lis_id: Optional[str] = _text()


@dataclass
class ContactInfo(Record):
    office: Optional[str] = _text()
    phone: Optional[str] = _text()
    fax: Optional[str] = _text()
    url: Optional[str] = _text()
    rss_url: Optional[str] = _text()
    contact_form: Optional[str] = _text()


@dataclass
class SocialAccounts(Record):
    twitter_account: Optional[str] = _text()
    facebook_account: Optional[str] = _text()
    youtube_account: Optional[str] = _text()


@dataclass
class VoteStats(Record):
    total_votes: Optional[int] = _int()
    missed_votes: Optional[int] = _int()
    total_present: Optional[int] = _int()
    missed_votes_pct: Optional[float] = _float()
    votes_with_party_pct: Optional[float] = _float()
    votes_against_party_pct: Optional[float] = _float()


# ---------------------------------------------------------------------------
# Entity records
# ---------------------------------------------------------------------------

@dataclass
class Member(Identity, TrackingIds, ContactInfo, SocialAccounts, VoteStats):
    """A member as listed by the chamber roster endpoint."""
    title: Optional[str] = _text()
    short_title: Optional[str] = _text()
    date_of_birth: Optional[str] = _text()
    gender: Optional[str] = _text()
    party: Optional[str] = _text()  # 'D', 'R', 'ID'
    leadership_role: Optional[str] = _text()
    in_office: Optional[bool] = _flag()
    seniority: Optional[int] = _int()
    next_election: Optional[str] = _text()
    state: Optional[str] = _text()
    district: Optional[str] = _text()  # may be "At-Large"
    at_large: Optional[bool] = _flag()
    senate_class: Optional[str] = _text()
    state_rank: Optional[str] = _text()
    # DW-NOMINATE ideological score
    dw_nominate: Optional[float] = _float()
    ideal_point: Optional[str] = _text()


@dataclass
class CommitteeMembership(Record):
    """A seat on a committee or subcommittee."""
    name: Optional[str] = _text()
    code: Optional[str] = _text()
    api_uri: Optional[str] = _text()
    side: Optional[str] = _text()  # 'majority' or 'minority'
    title: Optional[str] = _text()
    rank_in_party: Optional[int] = _int()
    begin_date: Optional[str] = _text()
    end_date: Optional[str] = _text()
    parent_committee_id: Optional[str] = _text()


@dataclass
class Role(ContactInfo, VoteStats):
    """One term of service in one chamber."""
    congress: Optional[int] = _int()
    chamber: Optional[str] = _text()
    title: Optional[str] = _text()
    short_title: Optional[str] = _text()
    state: Optional[str] = _text()
    party: Optional[str] = _text()
    leadership_role: Optional[str] = _text()
    fec_candidate_id: Optional[str] = _text()
    seniority: Optional[int] = _int()
    district: Optional[str] = _text()
    at_large: Optional[bool] = _flag()
    ocd_id: Optional[str] = _text()
    start_date: Optional[str] = _text()
    end_date: Optional[str] = _text()
    senate_class: Optional[str] = _text()
    state_rank: Optional[str] = _text()
    lis_id: Optional[str] = _text()
    bills_sponsored: Optional[int] = _int()
    bills_cosponsored: Optional[int] = _int()
    committees: List[CommitteeMembership] = _records(CommitteeMembership)
    subcommittees: List[CommitteeMembership] = _records(CommitteeMembership)


@dataclass
class MemberDetail(Identity, TrackingIds, SocialAccounts):
    """Full record for a single member, including every role held."""
    member_id: Optional[str] = _text()
    date_of_birth: Optional[str] = _text()
    gender: Optional[str] = _text()
    url: Optional[str] = _text()
    times_topics_url: Optional[str] = _text()
    times_tag: Optional[str] = _text()
    rss_url: Optional[str] = _text()
    in_office: Optional[bool] = _flag()
    current_party: Optional[str] = _text()
    most_recent_vote: Optional[str] = _text()
    last_updated: Optional[str] = _text()
    roles: List[Role] = _records(Role)


@dataclass
class MemberSearchResult(Record):
    """Short member record returned by the state and district lookups."""
    id: Optional[str] = _text()
    api_uri: Optional[str] = _text()
    name: Optional[str] = _text()
    first_name: Optional[str] = _text()
    middle_name: Optional[str] = _text()
    last_name: Optional[str] = _text()
    suffix: Optional[str] = _text()
    role: Optional[str] = _text()
    gender: Optional[str] = _text()
    party: Optional[str] = _text()
    times_topics_url: Optional[str] = _text()
    twitter_id: Optional[str] = _text()
    facebook_account: Optional[str] = _text()
    youtube_id: Optional[str] = _text()
    seniority: Optional[int] = _int()
    next_election: Optional[str] = _text()
    district: Optional[str] = _text()
    at_large: Optional[bool] = _flag()


@dataclass
class TransitionRecord(Identity):
    """A member arriving in (new) or leaving (departing) Congress."""
    party: Optional[str] = _text()
    chamber: Optional[str] = _text()
    state: Optional[str] = _text()
    district: Optional[str] = _text()
    start_date: Optional[str] = _text()
    begin_date: Optional[str] = _text()
    end_date: Optional[str] = _text()
    status: Optional[str] = _text()  # e.g. 'retired', 'lost-primary'
    note: Optional[str] = _text()
