from loguru import logger
from farm_forecast.config import set_config_for_test
from farm_forecast.data.models import InventoryRecord
from farm_forecast.forecast import ConsumptionForecaster, forecast
from farm_forecast.logging import configure_logging, get_logger

def capture():
    seen = []
    handler_id = logger.add(lambda msg: seen.append(str(msg)), level="DEBUG", format="{message}")
    return seen, handler_id

def test_forecast_keeps_caller_sinks():
    """Running a forecast leaves sinks added by the caller in place."""
    seen, handler_id = capture()
    try:
        forecast([], 30)
        ConsumptionForecaster().forecast([], 7)
        logger.info("after forecast")
    finally:
        logger.remove(handler_id)
    assert any("after forecast" in m for m in seen)

def test_caller_sink_receives_forecast_messages():
    record = InventoryRecord(
        id="inv-1", farm_name="Farm", product_name="Layer Mash",
        current_stock=5, average_monthly_consumption=30,
    )
    seen, handler_id = capture()
    try:
        forecast([record], 30)
    finally:
        logger.remove(handler_id)
    assert any("Generated 1 reorder suggestions" in m for m in seen)

def test_get_logger_keeps_caller_sinks():
    seen, handler_id = capture()
    try:
        get_logger("somewhere").info("first")
        get_logger("elsewhere").info("second")
    finally:
        logger.remove(handler_id)
    assert [m.strip() for m in seen] == ["first", "second"]

def test_configure_logging_keeps_caller_sinks():
    seen, handler_id = capture()
    try:
        set_config_for_test(log_level="ERROR")
        configure_logging()
        logger.debug("still delivered")
    finally:
        logger.remove(handler_id)
        set_config_for_test(log_level="WARNING")
        configure_logging()
    assert any("still delivered" in m for m in seen)
