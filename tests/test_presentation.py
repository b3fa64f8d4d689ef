import datetime as dt
import io
import json
from decimal import Decimal

from fx_reporting.operation import Operation
from fx_reporting.presentation import (
    TextPresenter,
    render_entity_ranking,
    render_json,
    render_settled_per_day,
)
from fx_reporting.reporting_engine import SETTLED_PER_DAY, generate_global_report
from fx_reporting.sample_data import sample_instructions


def test_render_settled_per_day():
    lines = render_settled_per_day(Operation.SELL, {dt.date(2016, 6, 20): Decimal("10025.00")})
    assert lines == [
        "Amount in USD settled per day for incoming instructions:",
        "Day: 2016-06-20, Amount: 10025.00 USD",
    ]


def test_render_entity_ranking():
    lines = render_entity_ranking(Operation.BUY, {"foo": Decimal("501.25")}, currency="EUR")
    assert lines == [
        "Ranking of entities in descending order by amount instructed to outgoing instructions:",
        "Entity: foo    , Amount: 501.25 EUR",
    ]


def test_text_presenter_writes_heading_for_empty_body():
    stream = io.StringIO()
    TextPresenter(stream=stream)(SETTLED_PER_DAY, Operation.BUY, {})
    assert stream.getvalue() == "\nAmount in USD settled per day for outgoing instructions:\n"


def test_render_json():
    report = generate_global_report(sample_instructions())
    data = json.loads(render_json(report))
    assert data["currency"] == "USD"
    assert data["settled_per_day"]["incoming"][0] == {"day": "2016-01-07", "amount": "14899.50"}
    assert [row["entity"] for row in data["entity_ranking"]["outgoing"]] == ["qux", "foo", "quux", "baz", "bar"]
