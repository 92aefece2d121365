"""CLI adapter printing the wallet balances shown on the dashboard."""

from wallet_dashboard.application.use_cases.get_wallet_balances import (
    GetWalletBalancesUseCase,
)
from wallet_dashboard.infrastructure.container import (
    build_database_adapter,
    build_price_source,
    build_wallet_repository,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the wallet balances use case and print one line per balance."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    try:
        price_source = build_price_source(db_adapter)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    use_case = GetWalletBalancesUseCase(
        balances_source=build_wallet_repository(db_adapter),
        price_source=price_source,
        logger=logger,
    )
    result = use_case.execute_with_dropped()

    for balance in result.displayed:
        print(
            f"{balance.chain:<10} {balance.currency:<8} "
            f"{balance.formatted_amount:>16} {balance.usd_value:>18,.2f} USD"
        )
    print(
        f"{len(result.displayed)} balances shown, "
        f"{len(result.dropped)} dropped."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
