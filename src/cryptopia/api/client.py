"""Cryptopia exchange client."""

from __future__ import annotations

from typing import Any

from .base import BaseApiClient, ProxyConfig
from .protocol import (
    DEFAULT_HOSTNAME,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
    ClientConfig,
    Credentials,
    RequestExecutor,
)


def _compact(**params: Any) -> dict[str, Any]:
    """Drop unset arguments, keeping argument order."""
    return {key: value for key, value in params.items() if value is not None}


def _truthy(**params: Any) -> dict[str, Any]:
    """Drop empty or zero arguments, keeping argument order."""
    return {key: value for key, value in params.items() if value}


class CryptopiaClient(BaseApiClient):
    """Cryptopia exchange client."""

    def __init__(
        self,
        key: str | None = None,
        secret: str | None = None,
        hostname: str | None = None,
        timeout_ms: int | None = None,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        proxy: ProxyConfig | None = None,
        executor: RequestExecutor | None = None,
    ):
        config = ClientConfig(
            hostname=hostname or DEFAULT_HOSTNAME,
            timeout_ms=timeout_ms or DEFAULT_TIMEOUT_MS,
            user_agent=user_agent,
        )
        super().__init__(Credentials(key, secret), config, proxy=proxy, executor=executor)

    #
    # Public endpoints
    #

    async def get_currencies(self) -> Any:
        return await self.public_request("GetCurrencies/", {})

    async def get_ticker(self, pair: str) -> Any:
        return await self.public_request(f"GetMarket/{pair}", {"currencyPair": pair})

    async def get_order_book(self, pair: str, limit: int | None = None) -> Any:
        params = {"currencyPair": pair, "limit": 1000}
        if limit is not None:
            params["limit"] = limit
        return await self.public_request(f"GetMarketOrders/{pair}/{params['limit']}", params)

    async def get_trades(self, pair: str, hours: int | None = None) -> Any:
        params = {"currencyPair": pair, "hours": 24}
        if hours:
            params["hours"] = hours
        return await self.public_request(f"GetMarketHistory/{pair}/{params['hours']}", params)

    async def get_kline(
        self,
        symbol: str,
        type: str | None = None,
        size: int | None = None,
        since: int | None = None,
    ) -> Any:
        params = {"symbol": symbol, **_truthy(type=type, size=size, since=since)}
        return await self.public_request("kline", params)

    async def get_lend_depth(self, symbol: str) -> Any:
        return await self.public_request("lend_depth", {"symbol": symbol})

    #
    # Private endpoints
    #

    async def get_balance(self) -> Any:
        """Fetch account balances."""
        return await self.private_request("GetBalance", {})

    async def add_trade(
        self,
        symbol: str,
        type: str,
        amount: float | None = None,
        price: float | None = None,
    ) -> Any:
        """Place an order. Zero or missing amount and price are left out."""
        params = {"symbol": symbol, "type": type, **_truthy(amount=amount, price=price)}
        return await self.private_request("trade", params)

    async def add_batch_trades(self, symbol: str, type: str, orders: list[dict[str, Any]]) -> Any:
        return await self.private_request("batch_trade", {"symbol": symbol, "type": type, "orders_data": orders})

    async def cancel_order(self, symbol: str, order_id: str | int) -> Any:
        return await self.private_request("cancel_order", {"symbol": symbol, "order_id": order_id})

    async def get_order_info(self, symbol: str, order_id: str | int) -> Any:
        return await self.private_request("order_info", {"symbol": symbol, "order_id": order_id})

    async def get_orders_info(self, symbol: str, type: int, order_id: str | int) -> Any:
        return await self.private_request(
            "orders_info", _compact(symbol=symbol, type=type, order_id=order_id)
        )

    async def get_account_records(
        self,
        symbol: str,
        type: int,
        current_page: int | None = None,
        page_length: int | None = None,
    ) -> Any:
        return await self.private_request(
            "account_records",
            _compact(symbol=symbol, type=type, current_page=current_page, page_length=page_length),
        )

    async def get_trade_history(self, symbol: str, since: int | None = None) -> Any:
        return await self.private_request("trade_history", _compact(symbol=symbol, since=since))

    async def get_order_history(
        self,
        symbol: str,
        status: int,
        current_page: int | None = None,
        page_length: int | None = None,
    ) -> Any:
        return await self.private_request(
            "order_history",
            _compact(symbol=symbol, status=status, current_page=current_page, page_length=page_length),
        )

    async def add_withdraw(
        self,
        symbol: str,
        chargefee: float,
        trade_pwd: str,
        withdraw_address: str,
        withdraw_amount: float,
    ) -> Any:
        """Request a withdrawal to an approved address."""
        return await self.private_request(
            "withdraw",
            _compact(
                symbol=symbol,
                chargefee=chargefee,
                trade_pwd=trade_pwd,
                withdraw_address=withdraw_address,
                withdraw_amount=withdraw_amount,
            ),
        )

    async def cancel_withdraw(self, symbol: str, withdraw_id: str | int) -> Any:
        return await self.private_request("cancel_withdraw", {"symbol": symbol, "withdraw_id": withdraw_id})
