import time

import streamlit as st

# Configuration
from farm_forecast.config import get_config

# InventoryDataSource interface + CSV implementation
from farm_forecast.data.util import get_data_source
from farm_forecast.data.models import InventoryFilters
from farm_forecast.forecast import (
    InvalidArgumentError,
    count_without_consumption_data,
    forecast,
    summarize_suggestions,
    suggestions_to_frame,
)

st.set_page_config(page_title="Inventory Forecasting", layout="wide")

# -----------------------------------------------------------------------------
# Data source selection (CSV for now), pointed at the configured data directory
# -----------------------------------------------------------------------------
config = get_config()
source = get_data_source("csv")

# -----------------------------------------------------------------------------
# Sidebar filters (all choices sourced via the data source)
# -----------------------------------------------------------------------------
st.sidebar.header("Filters")

horizon_options = config.horizon_options
default_index = (
    horizon_options.index(config.default_horizon_days)
    if config.default_horizon_days in horizon_options
    else 0
)
horizon_days = st.sidebar.selectbox(
    "Forecast period",
    horizon_options,
    index=default_index,
    format_func=lambda d: f"{d} Days",
)

farm_options = ["(All)"] + source.list_farm_names().values
farm_sel = st.sidebar.selectbox("Farm", farm_options)
prod_search = st.sidebar.text_input("Product search (contains)")

filters = InventoryFilters(
    farm_name=None if farm_sel == "(All)" else farm_sel,
    product_search=prod_search or None,
)

# -----------------------------------------------------------------------------
# Forecast (recomputed on every interaction from the current snapshot)
# -----------------------------------------------------------------------------
t0 = time.perf_counter()
records = source.get_inventory(filters)
t_inventory = (time.perf_counter() - t0) * 1000.0

t0 = time.perf_counter()
try:
    suggestions = forecast(records, int(horizon_days))
except InvalidArgumentError as e:
    st.error(str(e))
    st.stop()
t_forecast = (time.perf_counter() - t0) * 1000.0

summary = summarize_suggestions(suggestions)

st.title("Inventory Forecasting")

# -----------------------------------------------------------------------------
# KPIs
# -----------------------------------------------------------------------------
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Suggestions", f"{summary.total_suggestions:,}")
c2.metric("High Priority", f"{summary.high_priority_count:,}")
c3.metric("Medium Priority", f"{summary.medium_priority_count:,}")
c4.metric("Total Suggested Qty", f"{summary.total_suggested_quantity:,}")

with st.expander("Timings (ms)"):
    st.write(
        {
            "get_inventory": round(t_inventory, 2),
            "forecast": round(t_forecast, 2),
        }
    )

# -----------------------------------------------------------------------------
# Suggestions table
# -----------------------------------------------------------------------------
st.markdown(f"### Reorder suggestions ({summary.total_suggestions})")
if suggestions:
    st.dataframe(suggestions_to_frame(suggestions), use_container_width=True)
else:
    st.info("Your inventory levels look good for the selected forecast period.")

no_data = count_without_consumption_data(records)
if no_data:
    st.caption(
        f"{no_data} of {len(records)} items have no consumption data "
        "(average monthly consumption or feeding schedule) and were not forecast."
    )

with st.expander("How suggestions are calculated"):
    st.write(
        "Suggestions are based on recorded consumption and current stock levels. "
        "Daily use comes from the average monthly consumption (divided by 30) or, "
        "when that is missing, from the feeding schedule. Suggested quantities cover "
        "one month of use plus a 20% buffer. Actual consumption may vary with "
        "seasonal changes, livestock health or feeding schedule adjustments."
    )
