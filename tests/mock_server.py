"""Mock championship site.

This module defines the participant data used across the tests and an
aiohttp application that serves it as a championship page, marked up the
way the real site marks up its participant table: no column ids, one
``data-driver-id`` anchor per row, and a flag image inside the geo cell.
"""

import asyncio
from dataclasses import dataclass

from aiohttp import web


@dataclass
class MockParticipant:
    """A participant listed on the mock championship page."""

    position: str
    driver_id: str
    driver: str
    country: str | None
    city: str
    team: str
    car_class: str
    car: str


PARTICIPANTS: list[MockParticipant] = [
    MockParticipant(
        position="1",
        driver_id="1041",
        driver="Asker Abubekirov",
        country="Russia",
        city="Nalchik",
        team="Elbrus Motorsport",
        car_class="Silver",
        car="LADA Vesta NG Super-production",
    ),
    MockParticipant(
        position="2",
        driver_id="2290",
        driver="Driver One",
        country="Kazakhstan",
        city="Almaty",
        team="-",
        car_class="GT3",
        car="Porsche 911 GT3 R",
    ),
    MockParticipant(
        position="3",
        driver_id="317",
        driver="Jean Claude Van Damme",
        country=None,
        city="Brussels",
        team="Split Racing, Ltd.",
        car_class="Pro",
        car="BMW M4 GT3",
    ),
]


def generate_participant_row(participant: MockParticipant) -> str:
    """Render one participant as a table row."""
    flag = (
        f'<img class="country-flag" src="/flags/x.png" '
        f'title="{participant.country}" alt="">'
        if participant.country
        else ""
    )
    return (
        "<tr>"
        f'<td class="first text-end">{participant.position}</td>'
        f'<td data-driver-id="{participant.driver_id}">'
        f'<a href="/drivers/{participant.driver_id}">{participant.driver}</a>'
        "</td>"
        f"<td>{flag} {participant.city}</td>"
        f"<td>{participant.team}</td>"
        f"<td>{participant.car_class}</td>"
        f"<td>{participant.car}</td>"
        "</tr>"
    )


def generate_championship_html(
    participants: list[MockParticipant] | None = None,
) -> str:
    """Render the full championship page.

    The page has a header row, a separator row and an unrelated standings
    table, none of which carry the driver marker.
    """
    if participants is None:
        participants = PARTICIPANTS

    rows = "\n".join(generate_participant_row(p) for p in participants)
    return f"""<html>
<head><meta charset="utf-8"><title>Championship 537 - Participants</title></head>
<body>
<h1>Championship 537</h1>
<table class="table">
<tr><th>#</th><th>Driver</th><th>From</th><th>Team</th><th>Class</th><th>Car</th></tr>
<tr><td colspan="6">Registered</td></tr>
{rows}
</table>
<table id="teams">
<tr><td class="first text-end">1</td><td>Elbrus Motorsport</td><td>120</td></tr>
</table>
</body>
</html>"""


async def handle_championship(request: web.Request) -> web.Response:
    """Handle GET /championship - the participants page."""
    return web.Response(
        text=generate_championship_html(), content_type="text/html"
    )


async def handle_empty(request: web.Request) -> web.Response:
    """Handle GET /empty - a championship page with no participants yet."""
    return web.Response(
        text=generate_championship_html([]), content_type="text/html"
    )


async def handle_not_found(request: web.Request) -> web.Response:
    """Handle GET /missing - always 404."""
    return web.Response(
        text="<html><body><h1>404</h1></body></html>",
        status=404,
        content_type="text/html",
    )


async def handle_server_error(request: web.Request) -> web.Response:
    """Handle GET /server-error - always 500."""
    return web.Response(
        text="Internal Server Error",
        status=500,
        content_type="text/plain",
    )


async def handle_blank(request: web.Request) -> web.Response:
    """Handle GET /blank - 200 with an empty body."""
    return web.Response(body=b"", content_type="text/html")


async def handle_slow(request: web.Request) -> web.Response:
    """Handle GET /slow - responds after two seconds."""
    await asyncio.sleep(2)
    return web.Response(
        text=generate_championship_html(), content_type="text/html"
    )


async def handle_user_agent(request: web.Request) -> web.Response:
    """Handle GET /user-agent - echo the User-Agent header."""
    return web.Response(
        text=request.headers.get("User-Agent", ""), content_type="text/plain"
    )


def create_app() -> web.Application:
    """Create the aiohttp application with all routes.

    Returns:
        Configured aiohttp Application.
    """
    app = web.Application()
    app.router.add_get("/championship", handle_championship)
    app.router.add_get("/empty", handle_empty)
    app.router.add_get("/missing", handle_not_found)
    app.router.add_get("/server-error", handle_server_error)
    app.router.add_get("/blank", handle_blank)
    app.router.add_get("/slow", handle_slow)
    app.router.add_get("/user-agent", handle_user_agent)
    return app
