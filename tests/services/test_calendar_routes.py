"""Calendar Routes — verifies the public month page end to end.

Invariants:
    - The engine sees only the auxiliary's events overlapping the month
    - Combined slugs (youth) merge member auxiliaries
    - Bad month params fall back to the pinned today (2026-03)
    - Continuation segments carry an empty label
"""

from datetime import date, time

import pytest


async def test_empty_month_has_five_weeks(client):
    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03")
    assert res.status_code == 200
    data = res.json()
    assert data["month"] == "2026-03"
    assert data["previous_month"] == "2026-02"
    assert data["next_month"] == "2026-04"
    assert len(data["weeks"]) == 5
    assert all(w["max_lanes"] == 0 and w["segments"] == [] for w in data["weeks"])
    assert data["weeks"][0]["days"][0] == "2026-03-01"
    assert data["weeks"][-1]["days"][-1] == "2026-04-04"


async def test_event_crossing_weeks_yields_two_segments(client, make_event):
    await make_event("Retreat", date(2026, 3, 6), date(2026, 3, 9))

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03")
    weeks = res.json()["weeks"]

    [first] = weeks[0]["segments"]
    assert first["col_start"] == 6
    assert first["col_span"] == 2
    assert first["row"] == 2
    assert first["continues_after"] is True
    assert first["label"] == "Retreat"

    [second] = weeks[1]["segments"]
    assert second["col_start"] == 1
    assert second["col_span"] == 2
    assert second["continues_before"] is True
    assert second["label"] == ""
    assert second["event"]["title"] == "Retreat"


async def test_other_auxiliaries_are_filtered_out(client, make_event):
    await make_event("EQ night", date(2026, 3, 4), auxiliary="eq")
    await make_event("RS night", date(2026, 3, 4), auxiliary="rs")

    res = await client.get("/api/v1/auxiliaries/rs/calendar?month=2026-03")
    titles = [s["event"]["title"] for w in res.json()["weeks"] for s in w["segments"]]
    assert titles == ["RS night"]


async def test_youth_calendar_merges_young_men_and_young_women(client, make_event):
    await make_event("YM hike", date(2026, 3, 4), auxiliary="young-men")
    await make_event("YW camp", date(2026, 3, 4), auxiliary="young-women")
    await make_event("Primary", date(2026, 3, 4), auxiliary="primary")

    res = await client.get("/api/v1/auxiliaries/youth/calendar?month=2026-03")
    data = res.json()
    week = data["weeks"][0]
    assert {s["event"]["title"] for s in week["segments"]} == {"YM hike", "YW camp"}
    assert week["max_lanes"] == 2
    assert data["auxiliary"]["members"] == ["young-men", "young-women"]


async def test_event_starting_in_previous_month_is_shown(client, make_event):
    await make_event("Drive", date(2026, 2, 27), date(2026, 3, 2))

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03")
    [seg] = res.json()["weeks"][0]["segments"]
    assert seg["continues_before"] is True
    assert seg["col_span"] == 2


async def test_bad_month_param_falls_back_to_today(client):
    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=not-a-month")
    assert res.status_code == 200
    assert res.json()["month"] == "2026-03"


@pytest.mark.parametrize("month", ["0001-01", "9999-12"])
async def test_month_at_calendar_bounds_falls_back_to_today(client, month):
    res = await client.get(f"/api/v1/auxiliaries/eq/calendar?month={month}")
    assert res.status_code == 200
    assert res.json()["month"] == "2026-03"


async def test_months_next_to_calendar_bounds_render(client):
    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=0001-02")
    assert res.status_code == 200
    data = res.json()
    assert data["month"] == "0001-02"
    assert data["previous_month"] == "0001-01"
    assert data["weeks"][0]["days"][0] == "0001-01-28"

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=9999-11")
    assert res.status_code == 200
    assert res.json()["next_month"] == "9999-12"


async def test_missing_month_param_uses_today(client):
    res = await client.get("/api/v1/auxiliaries/eq/calendar")
    assert res.json()["month"] == "2026-03"


async def test_selected_date_lists_covering_events(client, make_event):
    await make_event("Retreat", date(2026, 3, 6), date(2026, 3, 9))
    await make_event("Other", date(2026, 3, 12))

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03&date=2026-03-08")
    selected = res.json()["selected_day"]
    assert selected["day"] == "2026-03-08"
    assert [e["title"] for e in selected["events"]] == ["Retreat"]


async def test_selected_day_events_carry_start_time(client, make_event):
    await make_event("Dinner", date(2026, 3, 12), start_time=time(18, 30))
    await make_event("Service day", date(2026, 3, 12))

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03&date=2026-03-12")
    events = res.json()["selected_day"]["events"]
    assert [(e["title"], e["start_time"]) for e in events] == [
        ("Dinner", "18:30:00"), ("Service day", None),
    ]


async def test_bad_date_param_selects_nothing(client):
    res = await client.get("/api/v1/auxiliaries/eq/calendar?date=yesterday")
    assert res.json()["selected_day"] is None


async def test_event_dates_cover_every_event_day(client, make_event):
    await make_event("Retreat", date(2026, 3, 6), date(2026, 3, 8))

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03")
    assert res.json()["event_dates"] == ["2026-03-06", "2026-03-07", "2026-03-08"]


async def test_upcoming_events_exclude_past_and_sort(client, make_event):
    await make_event("Past", date(2026, 3, 1))
    await make_event("Evening", date(2026, 3, 20), start_time=time(19, 0))
    await make_event("All day", date(2026, 3, 20))
    await make_event("Morning", date(2026, 3, 20), start_time=time(9, 0), location="Chapel")
    await make_event("Soon", date(2026, 3, 10))

    res = await client.get("/api/v1/auxiliaries/eq/calendar?month=2026-03")
    upcoming = res.json()["upcoming_events"]
    assert [e["title"] for e in upcoming] == ["Soon", "Morning", "Evening", "All day"]
    assert upcoming[1]["date_range"] == "Mar 20"
    assert upcoming[1]["location"] == "Chapel"


async def test_upcoming_events_are_limited(client, make_event):
    for day in range(11, 21):
        await make_event(f"E{day}", date(2026, 3, day))

    res = await client.get("/api/v1/auxiliaries/eq/calendar")
    assert len(res.json()["upcoming_events"]) == 8


async def test_recent_posts_newest_first_and_limited(client, make_post):
    for i in range(7):
        await make_post(f"Post {i}")

    res = await client.get("/api/v1/auxiliaries/eq/calendar")
    posts = res.json()["recent_posts"]
    assert len(posts) == 5
    assert posts[0]["title"] == "Post 6"


async def test_style_follows_auxiliary_color(client):
    res = await client.get("/api/v1/auxiliaries/rs/calendar")
    data = res.json()
    assert data["auxiliary"]["color"] == "purple"
    assert data["style"]["bar_classes"] == "bg-purple-500 text-white"


async def test_unknown_auxiliary_returns_404(client):
    res = await client.get("/api/v1/auxiliaries/choir/calendar")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_list_auxiliaries_includes_combined(client):
    res = await client.get("/api/v1/auxiliaries")
    slugs = [a["slug"] for a in res.json()]
    assert slugs == ["eq", "rs", "young-men", "young-women", "primary", "youth"]


async def test_root_redirects_to_default_calendar(client):
    res = await client.get("/", follow_redirects=False)
    assert res.status_code == 307
    assert res.headers["location"] == "/api/v1/auxiliaries/eq/calendar"
