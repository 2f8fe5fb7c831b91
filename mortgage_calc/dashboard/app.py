"""Plotly Dash front-end for the mortgage calculator."""

from dash import Dash, dcc, html, page_container

from mortgage_calc.config import settings

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title=settings.app_title,
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1(settings.app_title, style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link("Calculator", href="/", style={"color": "white"}),
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1000px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1000px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=8050)
