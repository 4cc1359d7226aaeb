"""
FastAPI entry point.

This module is the Composition Root: it builds the market data store, the
ledger and the price simulator once, injects them into the application
use-cases, and binds the simulator to the app lifespan.

Run locally:
    uvicorn paper_trading.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import contextlib
import logging
import random
import uuid
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paper_trading.application.services.price_simulator import PriceSimulator
from paper_trading.application.use_cases.execute_trade import ExecuteTradeUseCase
from paper_trading.application.use_cases.get_portfolio import GetPortfolioUseCase
from paper_trading.application.use_cases.get_stock_history import GetStockHistoryUseCase
from paper_trading.application.use_cases.get_stocks import GetAllStocksUseCase, GetStockUseCase
from paper_trading.domain.entities.trade import TradeSide
from paper_trading.domain.exceptions import (
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidMarketDataError,
    LedgerWriteError,
    SymbolNotSupportedError,
)
from paper_trading.infrastructure.config.settings import Settings
from paper_trading.infrastructure.entrypoints.schemas import (
    HistoryPointResponse,
    PortfolioResponse,
    StockResponse,
    TradeRequest,
    TradeResponse,
)
from paper_trading.infrastructure.logging.setup import configure_logging
from paper_trading.infrastructure.market_data.catalog import DEFAULT_STOCKS
from paper_trading.infrastructure.market_data.in_memory_store import InMemoryMarketDataStore
from paper_trading.infrastructure.portfolio.in_memory_ledger import InMemoryPortfolioLedger

logger = logging.getLogger(__name__)


@dataclass
class Container:
    store: InMemoryMarketDataStore
    ledger: InMemoryPortfolioLedger
    simulator: PriceSimulator
    get_all_stocks: GetAllStocksUseCase
    get_stock: GetStockUseCase
    get_history: GetStockHistoryUseCase
    get_portfolio: GetPortfolioUseCase
    execute_trade: ExecuteTradeUseCase


def build_container(settings: Settings, rng: Optional[random.Random] = None) -> Container:
    """Wire every adapter and use-case for one process."""
    rng = rng or random.Random()
    store = InMemoryMarketDataStore(history_limit=settings.history_limit, rng=rng)
    store.initialize(DEFAULT_STOCKS)
    ledger = InMemoryPortfolioLedger(initial_cash=settings.initial_cash)
    simulator = PriceSimulator(
        store,
        interval_seconds=settings.simulation_interval_seconds,
        max_price_change=settings.max_price_change,
        rng=rng,
    )
    return Container(
        store=store,
        ledger=ledger,
        simulator=simulator,
        get_all_stocks=GetAllStocksUseCase(store),
        get_stock=GetStockUseCase(store),
        get_history=GetStockHistoryUseCase(store),
        get_portfolio=GetPortfolioUseCase(ledger, store),
        execute_trade=ExecuteTradeUseCase(store, ledger),
    )


def create_app(settings: Optional[Settings] = None, rng: Optional[random.Random] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_file)
    container = build_container(settings, rng)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.simulation_enabled:
            container.simulator.start()
        try:
            yield
        finally:
            await container.simulator.stop()

    app = FastAPI(title="Paper Trading Simulator API", lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def tag_request(request: Request, call_next):
        req_id = str(uuid.uuid4())
        request.state.request_id = req_id
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled exception [%s] on %s %s", req_id, request.method, request.url.path)
            return JSONResponse(
                status_code=500, content={"detail": "Internal Server Error", "request_id": req_id}
            )
        response.headers["X-Request-ID"] = req_id
        return response

    @app.exception_handler(SymbolNotSupportedError)
    async def symbol_not_supported(request: Request, exc: SymbolNotSupportedError):
        return JSONResponse(status_code=404, content={"detail": str(exc), "symbol": exc.symbol})

    @app.exception_handler(InsufficientFundsError)
    async def insufficient_funds(request: Request, exc: InsufficientFundsError):
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "required": exc.required, "available": round(exc.available, 2)},
        )

    @app.exception_handler(InsufficientSharesError)
    async def insufficient_shares(request: Request, exc: InsufficientSharesError):
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "requested": exc.requested, "owned": exc.owned},
        )

    @app.exception_handler(InvalidMarketDataError)
    async def invalid_market_data(request: Request, exc: InvalidMarketDataError):
        return JSONResponse(
            status_code=500,
            content={"detail": f"Could not retrieve a valid price for {exc.symbol}. Trade cancelled."},
        )

    @app.exception_handler(LedgerWriteError)
    async def ledger_write_failed(request: Request, exc: LedgerWriteError):
        return JSONResponse(
            status_code=500, content={"detail": "Failed to update portfolio state during trade."}
        )

    @app.get("/stocks", response_model=list[StockResponse])
    async def list_stocks():
        return [StockResponse.from_entity(s) for s in container.get_all_stocks.execute()]

    @app.get("/stocks/{symbol}", response_model=StockResponse)
    async def get_stock(symbol: str):
        logger.info("Request received for single stock: %s", symbol)
        return StockResponse.from_entity(container.get_stock.execute(symbol))

    @app.get("/stocks/{symbol}/history", response_model=list[HistoryPointResponse])
    async def get_stock_history(symbol: str):
        logger.info("Request received for stock history: %s", symbol)
        return [HistoryPointResponse.from_entity(p) for p in container.get_history.execute(symbol)]

    @app.get("/portfolio", response_model=PortfolioResponse)
    async def get_portfolio():
        return PortfolioResponse.from_entity(container.get_portfolio.execute())

    @app.post("/trade", response_model=TradeResponse)
    async def trade(body: TradeRequest):
        logger.info("Trade request received: %s", body.model_dump())
        result = container.execute_trade.execute(body.symbol, body.quantity, TradeSide(body.side))
        return TradeResponse.from_entity(result)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


load_dotenv()
app = create_app()
