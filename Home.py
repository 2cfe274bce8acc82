"""
Congress Member Explorer
Browse members of Congress through the ProPublica Congress API
"""

from __future__ import annotations
from typing import List, Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from congress import (
    CongressAPIError,
    Transport,
    get_departing_members,
    get_member,
    get_members,
    get_members_by_state_both_chambers,
    get_new_members,
)
from congress import config
from congress.models import Record
from cli_utils import records_to_rows


# Page config
st.set_page_config(
    page_title="Congress Member Explorer",
    page_icon="🏛️",
    layout="wide"
)

st.title("🏛️ Congress Member Explorer")
st.markdown("Look up current and past members of the U.S. Congress.")

st.divider()


def get_api_key() -> Optional[str]:
    """Get the API key from secrets, environment or session state."""
    try:
        key = st.secrets.get("PROPUBLICA_API_KEY")
        if key:
            return key
    except FileNotFoundError:
        pass  # No secrets file, that's ok

    return config.get_api_key() or st.session_state.get("propublica_api_key")


def show_records(records: List[Record], caption: str) -> None:
    if not records:
        st.info("No results returned.")
        return

    st.success(f"Found {len(records)} {caption}")
    st.dataframe(pd.DataFrame(records_to_rows(records)), use_container_width=True)


api_key = get_api_key()

if not api_key:
    st.warning("⚠️ ProPublica Congress API key required")
    st.markdown("""
    To use this page:
    1. Request a free API key from ProPublica
    2. Set `PROPUBLICA_API_KEY` in your environment or Streamlit secrets

    Or enter temporarily below:
    """)

    temp_key = st.text_input("Enter API Key (temporary)", type="password", key="temp_api_key")
    if temp_key:
        st.session_state.propublica_api_key = temp_key
        st.success("✅ API key set for this session")
        st.rerun()
    st.stop()

try:
    timeout = config.get_timeout()
except ValueError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()

transport = Transport(endpoint=config.get_endpoint(), api_key=api_key, timeout=timeout)

tab1, tab2, tab3, tab4 = st.tabs(["📋 Chamber Roster", "🗺️ By State", "👤 Member Detail", "🔄 Arrivals & Departures"])

with tab1:
    col1, col2 = st.columns(2)
    with col1:
        congress_number = st.number_input("Congress", min_value=80, max_value=130, value=118, step=1)
    with col2:
        chamber = st.selectbox("Chamber", options=["house", "senate"], key="roster_chamber")

    if st.button("Load Roster", type="primary"):
        try:
            with st.spinner("Fetching members..."):
                members = get_members(transport, int(congress_number), chamber)
        except CongressAPIError as e:
            st.error(f"API error: {e}")
        else:
            show_records(members, "members")

            if members:
                party_counts = pd.Series([m.party or "Unknown" for m in members]).value_counts()
                fig = px.bar(
                    x=party_counts.index,
                    y=party_counts.values,
                    labels={"x": "Party", "y": "Members"},
                    title=f"Party breakdown, {int(congress_number)}th Congress {chamber.title()}"
                )
                st.plotly_chart(fig, use_container_width=True)

with tab2:
    state = st.text_input("State code", placeholder="e.g. VT", max_chars=2)

    if st.button("Find Members", type="primary", disabled=not state):
        try:
            with st.spinner(f"Fetching House and Senate members for {state.upper()}..."):
                members = get_members_by_state_both_chambers(transport, state.upper())
        except CongressAPIError as e:
            st.error(f"API error: {e}")
        else:
            show_records(members, "members")

with tab3:
    member_id = st.text_input("Member ID", placeholder="e.g. K000388")

    if st.button("Load Member", type="primary", disabled=not member_id):
        try:
            with st.spinner("Fetching member..."):
                detail = get_member(transport, member_id.strip())
        except CongressAPIError as e:
            st.error(f"API error: {e}")
        else:
            if detail is None:
                st.info("No member found.")
            else:
                st.markdown(f"### {detail.first_name or ''} {detail.last_name or ''}")
                st.caption(f"{detail.current_party or 'Unknown party'} • In office: {detail.in_office}")
                if detail.url:
                    st.caption(f"🌐 {detail.url}")
                show_records(detail.roles, "roles")

with tab4:
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("New Members")
        if st.button("Load New Members"):
            try:
                with st.spinner("Fetching new members..."):
                    show_records(get_new_members(transport), "new members")
            except CongressAPIError as e:
                st.error(f"API error: {e}")

    with col2:
        st.subheader("Departing Members")
        leaving_congress = st.number_input("Congress", min_value=80, max_value=130, value=118, step=1, key="leaving_congress")
        leaving_chamber = st.selectbox("Chamber", options=["house", "senate"], key="leaving_chamber")
        if st.button("Load Departing Members"):
            try:
                with st.spinner("Fetching departing members..."):
                    show_records(
                        get_departing_members(transport, int(leaving_congress), leaving_chamber),
                        "departing members"
                    )
            except CongressAPIError as e:
                st.error(f"API error: {e}")
