"""Server-rendered pages for entering and browsing records."""

import logging
from html import escape

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from form_records.api.dependencies import get_record_service
from form_records.domain.records import Record
from form_records.services.records import RecordService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page() -> HTMLResponse:
    """Landing page linking to the form and the table."""
    return HTMLResponse(_render_page("Home", _HOME_BODY))


@router.get("/add-data", response_class=HTMLResponse)
async def form_input_page(request: Request) -> HTMLResponse:
    """Input form seeded with an empty record."""
    saved = "success" in request.query_params
    return HTMLResponse(
        _render_page("Add Data", _format_form(Record.empty(), saved=saved))
    )


@router.get("/show-table-data", response_class=HTMLResponse)
async def show_table_data(
    service: RecordService = Depends(get_record_service),
) -> HTMLResponse:
    """Table of every stored record."""
    return HTMLResponse(_render_page("Stored Data", _format_table(service.find_all())))


@router.post("/save-data")
async def save_form_data(
    name: str = Form(""),
    service: RecordService = Depends(get_record_service),
) -> RedirectResponse:
    """Save a submitted form and redirect back to a fresh form."""
    saved = service.save(Record(id=None, name=name))
    logger.info("Saved form submission", extra={"record_id": saved.id})
    return RedirectResponse(
        url="/add-data?success", status_code=status.HTTP_303_SEE_OTHER
    )


def _format_form(record: Record, saved: bool) -> str:
    lines = ["<h1>Add Data</h1>"]
    if saved:
        lines.append('<p class="notice">Data saved successfully.</p>')
    lines.extend(
        [
            '<form method="post" action="/save-data">',
            '  <label for="name">Name</label><br />',
            f'  <input id="name" name="name" type="text" '
            f'value="{escape(record.name)}" required />',
            '  <button type="submit">Save</button>',
            "</form>",
            _NAV,
        ]
    )
    return "\n".join(lines)


def _format_table(records: list[Record]) -> str:
    lines = [
        "<h1>Stored Data</h1>",
        "<table>",
        "  <thead><tr><th>ID</th><th>Name</th></tr></thead>",
        "  <tbody>",
    ]
    if not records:
        lines.append('    <tr><td colspan="2">No data</td></tr>')
    for record in records:
        lines.append(
            f"    <tr><td>{record.id}</td><td>{escape(record.name)}</td></tr>"
        )
    lines.extend(["  </tbody>", "</table>", _NAV])
    return "\n".join(lines)


def _render_page(title: str, body: str) -> str:
    return _PAGE_HTML.format(title=escape(title), body=body)


_NAV = """<p>
  <a href="/">Home</a> |
  <a href="/add-data">Add data</a> |
  <a href="/show-table-data">Show table data</a>
</p>"""

_HOME_BODY = f"""<h1>Form Records</h1>
<p>Submit names through the form and browse everything stored so far.</p>
{_NAV}"""

_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>
    <style>
      body {{ font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }}
      input {{ padding: 0.4rem 0.6rem; width: 320px; }}
      button {{ padding: 0.4rem 0.8rem; margin-top: 0.5rem; }}
      table {{ border-collapse: collapse; }}
      th, td {{ border: 1px solid #ddd; padding: 0.4rem 0.8rem; text-align: left; }}
      .notice {{ color: #1a7f37; }}
    </style>
  </head>
  <body>
{body}
  </body>
</html>
"""
