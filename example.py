"""Example usage of the Extended SDK public info endpoints."""

import asyncio
import time

from extended_sdk import (
    ApiError,
    CandleType,
    ExtendedClient,
    LogLevel,
    OpenInterestInterval,
    RequestAbortedError,
)


async def main():
    async with ExtendedClient(is_testnet=True, log_level=LogLevel.INFO) as client:
        # ====================================================================
        # Markets
        # ====================================================================

        markets = await client.markets(market=["BTC-USD", "ETH-USD"])
        print(f"Found {len(markets)} markets:")
        for market in markets:
            print(f"  - {market.name}: last {market.market_stats.last_price} ({market.status.value})")

        stats = await client.market_stats("BTC-USD")
        print(f"\nBTC-USD mark {stats.mark_price}, funding {stats.funding_rate}")

        book = await client.market_order_book("BTC-USD")
        best_bid = book.bid[0].price if book.bid else "N/A"
        best_ask = book.ask[0].price if book.ask else "N/A"
        print(f"\nBest bid {best_bid} / best ask {best_ask}")

        trades = await client.market_trades("BTC-USD")
        for trade in trades[:5]:
            print(f"  {trade.side.value} {trade.quantity} @ {trade.price}")

        # ====================================================================
        # History
        # ====================================================================

        end_time = int(time.time() * 1000)
        start_time = end_time - 24 * 60 * 60 * 1000

        candles = await client.candles("BTC-USD", CandleType.TRADES, "1h", 24)
        print(f"\n{len(candles)} hourly candles")

        # Walk the funding history page by page
        cursor = None
        while True:
            page = await client.funding("BTC-USD", start_time, end_time, cursor=cursor, limit=100)
            print(f"Funding page: {page.pagination.count} rates")
            if page.pagination.count < 100:
                break
            cursor = page.pagination.cursor

        points = await client.open_interest(
            "ETH-USD", OpenInterestInterval.HOUR, start_time, end_time
        )
        print(f"{len(points)} open interest points")

        # ====================================================================
        # Errors and cancellation
        # ====================================================================

        try:
            await client.markets(market="NONEXISTENT-MARKET")
        except ApiError as error:
            print(f"\nServer error {error.code}: {error.message}")

        stop = asyncio.Event()
        stop.set()
        try:
            await client.market_trades("ETH-USD", signal=stop)
        except RequestAbortedError:
            print("Request aborted")


if __name__ == "__main__":
    asyncio.run(main())
