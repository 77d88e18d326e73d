"""Integration tests for GraphQL projection queries."""

from fastapi.testclient import TestClient

from projection_api.main import app


client = TestClient(app)

CDB = '{ name: "CDB 110% CDI", rateSpec: { kind: "percent-of-index", magnitude: 110 }, isTaxable: true }'
LCA = '{ name: "LCA 100% CDI", rateSpec: { kind: "percent-of-index", magnitude: 100 }, isTaxable: false }'
INDICES = "{ primaryFloatingRate: 0.1065, inflationRate: 0.045, policyRate: 0.1075 }"


def _post(query: str) -> dict:
    response = client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    return response.json()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_tax_brackets_and_transitions():
    data = _post("{ taxBrackets { minDays maxDays rate } transitionDays }")
    assert "errors" not in data
    brackets = data["data"]["taxBrackets"]
    assert [b["rate"] for b in brackets] == [0.225, 0.20, 0.175, 0.15]
    assert brackets[0] == {"minDays": 0, "maxDays": 180, "rate": 0.225}
    assert brackets[-1]["maxDays"] is None
    assert data["data"]["transitionDays"] == [180, 360, 720]


def test_default_indices():
    data = _post("{ defaultIndices { primaryFloatingRate inflationRate policyRate } }")
    assert "errors" not in data
    assert data["data"]["defaultIndices"] == {
        "primaryFloatingRate": 0.1065,
        "inflationRate": 0.045,
        "policyRate": 0.1075,
    }


def test_effective_annual_rate_partial_indices():
    """Omitted indices fall back to defaults; provided ones override."""
    query = """
    query {
      ipca: effectiveAnnualRate(
        instrument: { rateSpec: { kind: "inflation-plus", magnitude: 6 }, isTaxable: true }
      )
      ipcaHigh: effectiveAnnualRate(
        instrument: { rateSpec: { kind: "inflation-plus", magnitude: 6 }, isTaxable: true }
        indices: { inflationRate: 0.05 }
      )
    }
    """
    data = _post(query)
    assert "errors" not in data
    assert abs(data["data"]["ipca"] - 0.105) < 1e-4
    assert abs(data["data"]["ipcaHigh"] - 0.11) < 1e-4


def test_project_series_full_daily():
    query = f"""
    query {{
      projectSeries(instrument: {CDB}, indices: {INDICES}, totalDays: 730, sampled: false) {{
        name
        effectiveAnnualRate
        points {{ dayOffset grossReturn netReturn }}
      }}
    }}
    """
    data = _post(query)
    assert "errors" not in data
    result = data["data"]["projectSeries"]
    assert result["name"] == "CDB 110% CDI"
    assert abs(result["effectiveAnnualRate"] - 0.11715) < 1e-4
    points = result["points"]
    assert len(points) == 731
    assert points[721]["netReturn"] > points[720]["netReturn"]


def test_project_series_sampled_keeps_transition_days():
    query = f"""
    query {{
      projectSeries(instrument: {CDB}, totalDays: 800) {{
        points {{ dayOffset }}
      }}
    }}
    """
    data = _post(query)
    assert "errors" not in data
    days = [p["dayOffset"] for p in data["data"]["projectSeries"]["points"]]
    assert days[0] == 0 and days[-1] == 800
    for t in (180, 181, 360, 361, 720, 721):
        assert days.count(t) == 1
    assert days == sorted(set(days))


def test_project_portfolio_aligned_with_dates():
    query = f"""
    query {{
      projectPortfolio(
        instruments: [
          {CDB},
          {{ name: "IPCA+", rateSpec: {{ kind: "inflation-plus", magnitude: 6 }}, isTaxable: true, horizonDays: 400 }}
        ]
        startDate: "2024-01-15"
      ) {{
        startDate
        totalDays
        series {{ name points {{ dayOffset date }} }}
        bracketLines {{ day date }}
      }}
    }}
    """
    data = _post(query)
    assert "errors" not in data
    result = data["data"]["projectPortfolio"]
    assert result["startDate"] == "2024-01-15"
    assert result["totalDays"] == 400
    first, second = result["series"]
    assert [p["dayOffset"] for p in first["points"]] == [p["dayOffset"] for p in second["points"]]
    assert first["points"][0]["date"] == "2024-01-15"
    assert result["bracketLines"] == [
        {"day": 180, "date": "2024-07-13"},
        {"day": 360, "date": "2025-01-09"},
    ]


def test_equivalent_rates():
    query = f"""
    query {{
      equivalentRates(instrument: {CDB}) {{
        grossAnnual gross30Days net30Days gross365Days net365Days gross720Days net720Days
      }}
    }}
    """
    data = _post(query)
    assert "errors" not in data
    s = data["data"]["equivalentRates"]
    assert abs(s["grossAnnual"] - 0.11715) < 1e-4
    assert abs(s["net365Days"] - s["gross365Days"] * 0.825) < 1e-9
    assert abs(s["net30Days"] - s["gross30Days"] * 0.775) < 1e-9


def test_break_even_day():
    query = """
    query {
      crosses: breakEvenDay(
        taxed: { rateSpec: { kind: "fixed", magnitude: 12 }, isTaxable: true }
        untaxed: { rateSpec: { kind: "fixed", magnitude: 10 }, isTaxable: false }
      )
      never: breakEvenDay(
        taxed: { rateSpec: { kind: "percent-of-index", magnitude: 110 }, isTaxable: true }
        untaxed: { rateSpec: { kind: "percent-of-index", magnitude: 100 }, isTaxable: false }
        indices: { primaryFloatingRate: 0.1065 }
      )
    }
    """
    data = _post(query)
    assert "errors" not in data
    assert data["data"]["crosses"] == 721
    assert data["data"]["never"] is None


def test_unknown_kind_returns_error():
    query = """
    query {
      effectiveAnnualRate(instrument: { rateSpec: { kind: "poupanca", magnitude: 100 }, isTaxable: false })
    }
    """
    data = _post(query)
    assert "errors" in data
    assert any("rate kind" in e["message"].lower() for e in data["errors"])


def test_negative_total_days_returns_error():
    query = f"""
    query {{
      projectSeries(instrument: {CDB}, totalDays: -1) {{ name }}
    }}
    """
    data = _post(query)
    assert "errors" in data
    assert any("totalDays" in e["message"] for e in data["errors"])


def test_invalid_max_days_returns_error():
    query = f"""
    query {{
      breakEvenDay(taxed: {CDB}, untaxed: {LCA}, maxDays: 0)
    }}
    """
    data = _post(query)
    assert "errors" in data
