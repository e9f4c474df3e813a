"""
FastAPI server for simunits.

Exposes unit conversion, pressure dispatch, display formatting and
time-of-day comparison as REST endpoints, plus a small HTML page.
"""

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from simunits import __version__
from simunits.config import Settings, apply_number_locale, build_formatter, get_settings
from simunits.conversions import CANONICAL_UNITS, list_conversions
from simunits.formatting import QuantityFormatter
from simunits.models.inputs import (
    ConversionRequest,
    FormatRequest,
    PressureConversionRequest,
    PressureFormatRequest,
    TimeComparisonRequest,
)
from simunits.models.outputs import (
    ConversionCatalog,
    ConversionResult,
    FormattedValue,
    PressureConversionResult,
    PressureUnitInfo,
    TimeComparisonResult,
)
from simunits.operations import (
    list_pressure_units,
    run_conversion,
    run_pressure_conversion,
    run_time_comparison,
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="simunits API",
    description="""
    Unit conversion and display formatting for vehicle simulation values.

    All inputs are in canonical units (m, m/s, kg, kPa, ...) unless a unit
    field says otherwise.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


HTML_UI = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>simunits</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 720px;
            margin: 0 auto;
            padding: 20px;
            color: #333;
        }
        h1 { color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; }
        label { display: inline-block; width: 110px; }
        .row { margin-bottom: 10px; }
        button { padding: 8px 18px; background: #3498db; color: white; border: none; border-radius: 4px; }
        #result { margin-top: 20px; font-size: 24px; font-weight: bold; color: #27ae60; }
    </style>
</head>
<body>
    <h1>simunits</h1>
    <div class="row">
        <label for="style">Quantity</label>
        <select id="style">
            <option value="speed-display">speed (m/s)</option>
            <option value="speed-limit">speed limit (m/s)</option>
            <option value="distance-display">distance (m)</option>
            <option value="short-distance">short distance (m)</option>
            <option value="mass">mass (kg)</option>
        </select>
    </div>
    <div class="row">
        <label for="value">Value</label>
        <input id="value" type="number" step="any" value="27.78">
    </div>
    <div class="row">
        <label for="metric">Metric</label>
        <input id="metric" type="checkbox" checked>
    </div>
    <button onclick="formatValue()">Format</button>
    <div id="result"></div>
    <p>API docs: <a href="/docs">/docs</a></p>
    <script>
        async function formatValue() {
            const body = {
                style: document.getElementById('style').value,
                value: parseFloat(document.getElementById('value').value),
                is_metric: document.getElementById('metric').checked,
            };
            const response = await fetch('/format', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify(body),
            });
            const data = await response.json();
            document.getElementById('result').textContent =
                response.ok ? data.text : JSON.stringify(data.detail);
        }
    </script>
</body>
</html>
"""


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error response model."""
    detail: str


@lru_cache
def get_formatter() -> QuantityFormatter:
    """Formatter built once from the configured label catalog and number locale."""
    settings = get_settings()
    apply_number_locale(settings)
    return build_formatter(settings)


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the HTML UI."""
    return HTML_UI


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/conversions", response_model=ConversionCatalog, tags=["Reference"])
async def conversions_catalog():
    """List the conversion functions of every quantity family."""
    return ConversionCatalog(families=list_conversions(), canonical_units=CANONICAL_UNITS)


@app.post(
    "/convert",
    response_model=ConversionResult,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    tags=["Conversions"],
)
async def convert(request: ConversionRequest):
    """
    Apply one conversion function.

    Dual-mode functions (taking a metric/imperial flag) require is_metric.
    """
    try:
        return run_conversion(request)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/pressure-units", response_model=list[PressureUnitInfo], tags=["Reference"])
async def pressure_units(formatter: QuantityFormatter = Depends(get_formatter)):
    """Get the list of selectable pressure units."""
    return list_pressure_units(formatter)


@app.post(
    "/pressure/convert",
    response_model=PressureConversionResult,
    responses={400: {"model": ErrorResponse}},
    tags=["Conversions"],
)
async def pressure_convert(request: PressureConversionRequest):
    """Convert a pressure between two units through kPa."""
    try:
        return run_pressure_conversion(request)
    except ValueError as e:
        logger.warning("Pressure conversion rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/format", response_model=FormattedValue, tags=["Formatting"])
async def format_value(
    request: FormatRequest,
    settings: Settings = Depends(get_settings),
    formatter: QuantityFormatter = Depends(get_formatter),
):
    """Format a speed (m/s), distance (m) or mass (kg) for display."""
    is_metric = settings.is_metric if request.is_metric is None else request.is_metric
    try:
        text = formatter.format_quantity(request.style.value, request.value, is_metric)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FormattedValue(text=text)


@app.post(
    "/format/pressure",
    response_model=FormattedValue,
    responses={400: {"model": ErrorResponse}},
    tags=["Formatting"],
)
async def format_pressure(
    request: PressureFormatRequest,
    settings: Settings = Depends(get_settings),
    formatter: QuantityFormatter = Depends(get_formatter),
):
    """
    Format a pressure in another unit.

    Returns an empty text if either unit is "none".
    """
    output_unit = request.output_unit or settings.pressure_unit
    try:
        text = formatter.format_pressure(
            request.value, request.input_unit, output_unit, request.unit_displayed
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FormattedValue(text=text)


@app.post("/schedule/compare", response_model=TimeComparisonResult, tags=["Schedule"])
async def schedule_compare(request: TimeComparisonRequest):
    """
    Order two times of day.

    Early morning (before 08:00) counts as later than evening (after
    16:00); otherwise times compare numerically.
    """
    return run_time_comparison(request)
