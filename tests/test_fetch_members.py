from __future__ import annotations

import json

import pytest

import fetch_members
from congress import TransportError
from congress.models import Member, MemberDetail


class RecordingTransport:
    endpoint = "https://api.example.org/congress/v1"


def test_parse_args_reads_query_and_options():
    args = fetch_members.parse_args(["members", "--congress", "115", "--chamber", "senate", "--format", "csv"])
    assert args.query == "members"
    assert args.congress == 115
    assert args.chamber == "senate"
    assert args.format == "csv"
    assert args.output is None


def test_validate_args_reports_missing_flags():
    args = fetch_members.parse_args(["by-district", "--state", "VT"])
    with pytest.raises(ValueError, match="--chamber, --district"):
        fetch_members.validate_args(args)


def test_run_query_dispatches_to_operation(monkeypatch):
    calls = []

    def fake_by_district(transport, chamber, state, district):
        calls.append((chamber, state, district))
        return []

    monkeypatch.setattr(fetch_members.congress, "get_members_by_district", fake_by_district)
    args = fetch_members.parse_args(["by-district", "--chamber", "house", "--state", "VT", "--district", "1"])

    assert fetch_members.run_query(RecordingTransport(), args) == []
    assert calls == [("house", "VT", 1)]


def test_run_query_wraps_single_member(monkeypatch):
    detail = MemberDetail.from_dict({"id": "K000388"})
    monkeypatch.setattr(fetch_members.congress, "get_member", lambda transport, member_id: detail)
    args = fetch_members.parse_args(["member", "--member-id", "K000388"])

    assert fetch_members.run_query(RecordingTransport(), args) == [detail]


def test_render_output_json_and_csv():
    records = [Member.from_dict({"id": "A1", "party": "D"}), Member.from_dict({"id": "B2", "party": "R"})]

    as_json = json.loads(fetch_members.render_output(records, "json"))
    as_csv = fetch_members.render_output(records, "csv").splitlines()

    assert [item["id"] for item in as_json] == ["A1", "B2"]
    header = as_csv[0].split(",")
    assert "id" in header and "party" in header
    assert len(as_csv) == 3


def test_main_writes_output_file(monkeypatch, tmp_path):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "key")
    monkeypatch.setattr(
        fetch_members.congress, "get_new_members", lambda transport: [Member.from_dict({"id": "N1"})]
    )
    output = tmp_path / "new.json"

    assert fetch_members.main(["new", "-o", str(output)]) == 0
    assert json.loads(output.read_text())[0]["id"] == "N1"


def test_main_returns_error_code_on_api_failure(monkeypatch, capsys):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "key")

    def fail(transport):
        raise TransportError("connection refused")

    monkeypatch.setattr(fetch_members.congress, "get_new_members", fail)

    assert fetch_members.main(["new"]) == 1
    assert "TransportError" in capsys.readouterr().err


def test_main_without_api_key(monkeypatch):
    monkeypatch.delenv("PROPUBLICA_API_KEY", raising=False)
    monkeypatch.delenv("CONGRESS_API_KEY", raising=False)
    assert fetch_members.main(["new"]) == 1


def test_validate_args_rejects_empty_strings():
    args = fetch_members.parse_args(["by-state", "--chamber", "", "--state", "VT"])
    with pytest.raises(ValueError, match="--chamber"):
        fetch_members.validate_args(args)


def test_main_returns_error_code_for_empty_parameter(monkeypatch, capsys):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "key")

    assert fetch_members.main(["members", "--congress", "115", "--chamber", ""]) == 1
    assert "--chamber" in capsys.readouterr().err
