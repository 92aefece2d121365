"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from wallet_dashboard.application.use_cases.get_swap_quote import (
    GetSwapQuoteUseCase,
    SwapQuote,
)
from wallet_dashboard.application.use_cases.get_wallet_balances import (
    DisplayBalance,
    GetWalletBalancesUseCase,
)
from wallet_dashboard.domain.services.swap import (
    format_price,
    format_swap_amount,
)
from wallet_dashboard.infrastructure.container import (
    build_database_adapter,
    build_price_source,
    build_wallet_repository,
)


def _fetch_wallet_balances() -> Sequence[DisplayBalance]:
    """Fetch display-ready wallet balances."""
    adapter = build_database_adapter()
    use_case = GetWalletBalancesUseCase(
        balances_source=build_wallet_repository(adapter),
        price_source=build_price_source(adapter),
    )
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_wallet_balances(schema_version: int = 1) -> Sequence[DisplayBalance]:
    """Cached wrapper around _fetch_wallet_balances."""
    _ = schema_version
    return _fetch_wallet_balances()


def _build_swap_use_case() -> GetSwapQuoteUseCase:
    return GetSwapQuoteUseCase(price_source=build_price_source())


@st.cache_data(show_spinner=False)
def _load_prices() -> dict[str, Decimal]:
    """Cached latest price per currency."""
    return _build_swap_use_case().list_prices()


def _fetch_swap_quote(
    from_currency: str,
    to_currency: str,
    amount: Decimal,
) -> SwapQuote | None:
    """Quote a swap with the latest prices."""
    return _build_swap_use_case().execute(from_currency, to_currency, amount)


def _format_usd(value: Decimal) -> str:
    """Format USD values for display."""
    return f"${value:,.2f}"


def _balance_rows(
    balances: Sequence[DisplayBalance],
) -> list[dict[str, str]]:
    """Build one table row per balance, keyed by chain and currency."""
    return [
        {
            "Key": f"{balance.chain}-{balance.currency}",
            "Chain": balance.chain,
            "Currency": balance.currency,
            "Amount": balance.formatted_amount,
            "USD Value": _format_usd(balance.usd_value),
        }
        for balance in balances
    ]


def _prepare_value_chart_data(
    balances: Sequence[DisplayBalance],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready USD values, keeping display order."""
    return [
        {
            "key": f"{balance.chain}-{balance.currency}",
            "currency": balance.currency,
            "chain": balance.chain,
            "usd_value": float(balance.usd_value),
            "usd_label": _format_usd(balance.usd_value),
            "order": index,
        }
        for index, balance in enumerate(balances)
    ]


def _render_value_chart(balances: Sequence[DisplayBalance]) -> None:
    """Render a bar chart of USD value per balance."""
    data = _prepare_value_chart_data(balances)
    if not any(item["usd_value"] for item in data):
        st.info("No priced balances available for the chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        y=alt.Y(
            "key:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        x=alt.X("usd_value:Q", title="USD value"),
        color=alt.Color("chain:N", legend=alt.Legend(orient="bottom")),
        tooltip=[
            alt.Tooltip("currency:N"),
            alt.Tooltip("chain:N"),
            alt.Tooltip("usd_label:N"),
        ],
    )
    st.subheader("Value by balance")
    st.altair_chart(chart, width="stretch")


def _render_balances() -> None:
    """Render the balances page."""
    balances = _load_wallet_balances()
    if not balances:
        st.warning("No balances to display.")
        return
    total = sum((item.usd_value for item in balances), start=Decimal("0"))
    st.metric("Total value", _format_usd(total))
    st.caption(f"{len(balances)} balances shown")
    st.dataframe(_balance_rows(balances), width="stretch", hide_index=True)
    _render_value_chart(balances)


def _render_swap() -> None:
    """Render the swap quote page."""
    prices = _load_prices()
    currencies = list(prices)
    if len(currencies) < 2:
        st.warning("At least two priced currencies are required to swap.")
        return
    from_col, to_col = st.columns(2)
    from_currency = from_col.selectbox("From", currencies, index=0)
    to_currency = to_col.selectbox("To", currencies, index=1)
    amount = st.number_input("Amount", min_value=0.0, value=1.0)

    quote = _fetch_swap_quote(from_currency, to_currency, Decimal(str(amount)))
    if quote is None:
        st.info("Enter a positive amount to get a quote.")
        return
    st.metric(
        f"You receive ({quote.to_currency})",
        format_swap_amount(quote.to_amount),
    )
    st.caption(
        f"1 {quote.from_currency} = {format_swap_amount(quote.rate)} "
        f"{quote.to_currency}"
    )
    st.dataframe(
        [
            {"Currency": currency, "Price": format_price(price)}
            for currency, price in prices.items()
        ],
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wallet Dashboard", layout="wide")
    st.title("Wallet Dashboard")

    page = st.sidebar.selectbox("Page", ["Balances", "Swap"])
    if page == "Balances":
        _render_balances()
    else:
        _render_swap()


if __name__ == "__main__":  # pragma: no cover
    main()
