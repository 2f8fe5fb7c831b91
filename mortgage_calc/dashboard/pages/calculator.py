"""Calculator page: form entry, result card and payment schedule comparison."""

import dash
from dash import html, dcc, callback, Input, Output, State
import plotly.graph_objects as go

from mortgage_calc.dashboard.comparison import build_request, schedule_comparison
from mortgage_calc.engine.mortgage import calculate_mortgage
from mortgage_calc.models.mortgage import Rejection

dash.register_page(__name__, path="/", name="Calculator")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

SCHEDULE_LABELS = {
    "monthly": "Monthly",
    "biweekly": "Bi-weekly",
    "accelerated-biweekly": "Accelerated bi-weekly",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "160px"})


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


layout = html.Div([
    html.H2("Mortgage Payment Calculator"),

    html.Div([
        _field("Property Price ($)", dcc.Input(id="calc-price", type="number", value=600000, style=FIELD_STYLE)),
        _field("Down Payment ($)", dcc.Input(id="calc-down", type="number", value=50000, style=FIELD_STYLE)),
        _field("Interest Rate (%)", dcc.Input(id="calc-rate", type="number", value=5.99, step=0.01, style=FIELD_STYLE)),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
    html.Div([
        _field("Amortization (years)", dcc.Dropdown(
            id="calc-amortization",
            options=[{"label": str(y), "value": y} for y in range(5, 35, 5)],
            value=25,
            clearable=False,
        )),
        _field("Payment Schedule", dcc.Dropdown(
            id="calc-schedule",
            options=[{"label": label, "value": value} for value, label in SCHEDULE_LABELS.items()],
            value="monthly",
            clearable=False,
        )),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
    html.Div([
        _field("Down Payment Source", dcc.Dropdown(
            id="calc-source",
            options=[
                {"label": "Traditional", "value": "traditional"},
                {"label": "Non-traditional (gifted, borrowed)", "value": "non-traditional"},
            ],
            value="traditional",
            clearable=False,
        )),
        _field("Employment", dcc.Dropdown(
            id="calc-employment",
            options=[
                {"label": "Regular", "value": "regular"},
                {"label": "Self-employed (non-verified income)", "value": "self-employed-non-verified"},
            ],
            value="regular",
            clearable=False,
        )),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
    dcc.Checklist(
        id="calc-flags",
        options=[
            {"label": " First-time buyer", "value": "first_time_buyer"},
            {"label": " New construction", "value": "new_construction"},
        ],
        value=["first_time_buyer"],
        inline=True,
        style={"marginBottom": "1rem"},
    ),
    html.Button("Calculate", id="calc-btn", n_clicks=0, style=BTN_STYLE),

    dcc.Loading(html.Div(id="calc-results", style={"marginTop": "2rem"})),
])


def _build_result_card(result, schedule):
    rows = [
        ("Down payment", f"{float(result.down_payment_percentage):.2f}%"),
        ("Mortgage before insurance", _dollar(result.mortgage_before_insurance)),
        ("Insurance premium rate", f"{float(result.insurance_premium_rate) * 100:.2f}%"),
        ("Insurance premium", _dollar(result.insurance_amount)),
        ("Total mortgage", _dollar(result.total_mortgage)),
        (f"{SCHEDULE_LABELS[schedule]} payment", _dollar(result.payment_amount)),
    ]
    return html.Table([
        html.Tr([html.Td(label), html.Td(value, style={"textAlign": "right", "fontWeight": "bold"})])
        for label, value in rows
    ], style={"width": "100%", "maxWidth": "480px", "marginBottom": "1.5rem"})


def _build_comparison_chart(comparison):
    labels = [SCHEDULE_LABELS[s.value] for s in comparison]
    yearly = [float(total) for _, total in comparison.values()]
    fig = go.Figure(go.Bar(
        x=labels,
        y=yearly,
        text=[_dollar(p) for p, _ in comparison.values()],
        textposition="outside",
        marker_color=["#1a1a2e", "#16213e", "#e94560"],
    ))
    fig.update_layout(
        title="Yearly Outlay by Payment Schedule (label: per-payment amount)",
        yaxis_title="Paid per Year ($)",
        height=380,
    )
    return dcc.Graph(figure=fig)


@callback(
    Output("calc-results", "children"),
    Input("calc-btn", "n_clicks"),
    State("calc-price", "value"),
    State("calc-down", "value"),
    State("calc-rate", "value"),
    State("calc-amortization", "value"),
    State("calc-schedule", "value"),
    State("calc-flags", "value"),
    State("calc-source", "value"),
    State("calc-employment", "value"),
    prevent_initial_call=True,
)
def run_calculation(n_clicks, price, down, rate, amortization, schedule, flags, source, employment):
    if not price or not down or price < 0 or down < 0:
        return html.Div(
            "Property price and down payment are required and must be positive.",
            style={"color": "red", "padding": "1rem"},
        )

    request = build_request(price, down, rate, amortization, schedule, flags, source, employment)
    outcome = calculate_mortgage(request)
    if isinstance(outcome, Rejection):
        return html.Div(outcome.message, style={"color": "red", "padding": "1rem"})

    comparison = schedule_comparison(request, outcome.total_mortgage)
    return html.Div([
        _build_result_card(outcome, schedule),
        _build_comparison_chart(comparison),
    ])
