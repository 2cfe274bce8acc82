"""Client for the ProPublica Congress API members endpoints."""

from .errors import APIErrorResponse, CongressAPIError, DecodeError, TransportError
from .models import (
    CommitteeMembership,
    Member,
    MemberDetail,
    MemberSearchResult,
    Role,
    TransitionRecord,
)
from .transport import Transport
from .decoder import Unwrap, decode
from .api import (
    ENDPOINTS,
    Endpoint,
    execute,
    get_departing_members,
    get_member,
    get_members,
    get_members_by_district,
    get_members_by_state,
    get_members_by_state_both_chambers,
    get_new_members,
)

__all__ = [
    'APIErrorResponse',
    'CongressAPIError',
    'DecodeError',
    'TransportError',
    'CommitteeMembership',
    'Member',
    'MemberDetail',
    'MemberSearchResult',
    'Role',
    'TransitionRecord',
    'Transport',
    'Unwrap',
    'decode',
    'ENDPOINTS',
    'Endpoint',
    'execute',
    'get_departing_members',
    'get_member',
    'get_members',
    'get_members_by_district',
    'get_members_by_state',
    'get_members_by_state_both_chambers',
    'get_new_members',
]
