"""Streamlit UI for the Sri Lanka trip planner.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import httpx  # noqa: E402
import streamlit as st  # noqa: E402

from backend.app.config import get_settings  # noqa: E402
from ui.helpers import (  # noqa: E402
    HOTEL_CATEGORIES,
    INTERESTS,
    VEHICLE_CLASSES,
    VEHICLE_TYPES,
    build_trip_request,
    download_pdf,
    format_day_rows,
    format_lkr,
    format_violations,
    generate_itinerary,
    list_itineraries,
    save_itinerary,
)

BACKEND_URL = get_settings().backend_url

st.set_page_config(page_title="Sri Lanka Trip Planner", page_icon="🌴", layout="wide")

if "trip" not in st.session_state:
    st.session_state.trip = None
if "result" not in st.session_state:
    st.session_state.result = None
if "error" not in st.session_state:
    st.session_state.error = None

st.title("🌴 Sri Lanka Trip Planner")
st.divider()

col_form, col_plan = st.columns([1, 2])

with col_form:
    st.subheader("Trip Setup")

    with st.form("trip_form"):
        title = st.text_input("Trip title", value="")
        days = st.number_input("Days", min_value=1, max_value=30, value=3, step=1)
        guests = st.number_input("Guests", min_value=1, max_value=40, value=2, step=1)
        budget = st.number_input("Budget (LKR)", min_value=0.0, value=100000.0, step=5000.0)
        interests = st.multiselect("Interests", INTERESTS, default=["Culture"])
        hotel_category = st.selectbox("Hotel category", [""] + HOTEL_CATEGORIES, index=2)
        vehicle_type = st.selectbox("Vehicle type", [""] + VEHICLE_TYPES, index=1)
        vehicle_class = st.selectbox("Vehicle class", [""] + VEHICLE_CLASSES, index=0)

        submitted = st.form_submit_button("Generate Itinerary", type="primary")

    if submitted:
        trip = build_trip_request(
            days=int(days),
            guests=int(guests),
            budget=float(budget),
            interests=interests,
            hotel_category=hotel_category,
            vehicle_type=vehicle_type,
            vehicle_class=vehicle_class,
            title=title,
        )
        try:
            st.session_state.result = generate_itinerary(BACKEND_URL, trip)
            st.session_state.trip = trip
            st.session_state.error = None
        except (ValueError, httpx.HTTPError) as e:
            st.session_state.result = None
            st.session_state.error = str(e)

    if st.session_state.error:
        st.error(st.session_state.error)

with col_plan:
    st.subheader("Your Itinerary")

    result = st.session_state.result
    if result:
        hotel = result["hotel"]
        vehicle = result["vehicle"]
        st.markdown(
            f"**Hotel:** {hotel['hotel_name']} ({hotel['stars']}★, {hotel['city']})  \n"
            f"**Vehicle:** {vehicle['vehicle_type']} - {vehicle['model']}"
        )
        st.table(format_day_rows(result))
        st.metric("Estimated Total", format_lkr(result["total_cost"]))

        for message in format_violations(result):
            st.warning(message)

        col_save, col_pdf = st.columns(2)
        with col_save:
            if st.button("Save Itinerary"):
                try:
                    itinerary_id = save_itinerary(
                        BACKEND_URL, st.session_state.trip, result, title=title or None
                    )
                    st.success(f"Saved ({itinerary_id[:8]})")
                except httpx.HTTPError as e:
                    st.error(f"Save failed: {e}")
        with col_pdf:
            try:
                pdf = download_pdf(BACKEND_URL, st.session_state.trip, result)
                st.download_button("Download PDF", pdf, "itinerary.pdf", "application/pdf")
            except httpx.HTTPError as e:
                st.error(f"PDF export failed: {e}")
    else:
        st.info("Fill in the form to generate an itinerary.")

st.divider()
st.subheader("Saved Itineraries")

try:
    saved = list_itineraries(BACKEND_URL)
except httpx.HTTPError:
    saved = []
    st.caption("Backend unavailable")

for item in saved:
    st.markdown(
        f"**{item['title']}** - {item['days']} day(s), {item['guests']} guest(s), "
        f"{', '.join(item['interests'])} - {format_lkr(item['total_cost'])}"
    )
