import time

import pandas as pd
import streamlit as st
from pydantic import ValidationError

# Configuration
from stockview.config import get_config

# DataAccess factory + engine
from stockview.data.util import get_data_access
from stockview.data.models import DateRange, FilterCriteria, QuantityBucket, SortField, StockStatus
from stockview.engine import product_history
from stockview.services.inventory import load_inventory_view, load_report_summary, save_threshold

st.set_page_config(page_title="Inventory Dashboard", layout="wide")

config = get_config()
da = get_data_access()

STATUS_LABELS = {StockStatus.NORMAL: "Normal", StockStatus.LOW: "Low", StockStatus.CRITICAL: "Critical"}

# -----------------------------------------------------------------------------
# Sidebar filters (all choices sourced via the DataAccess layer)
# -----------------------------------------------------------------------------
st.sidebar.header("Filters")

search = st.sidebar.text_input("Search product or category")

categories = da.list_categories().values
cat_options = ["(All)"] + categories
default_index = cat_options.index(config.default_category) if config.default_category in cat_options else 0
cat_sel = st.sidebar.selectbox("Category", cat_options, index=default_index)

status_sel = st.sidebar.selectbox("Status", ["(Any)"] + [s.value for s in StockStatus])
bucket_sel = st.sidebar.selectbox("Quantity", ["(Any)"] + [b.value for b in QuantityBucket])

range_sel = st.sidebar.radio("Last updated", ["(Any)"] + [r.value for r in DateRange], horizontal=True)
start_date = end_date = None
if range_sel == DateRange.CUSTOM.value:
    bounds = da.get_movement_date_bounds()
    date_range = st.sidebar.date_input("Date range", bounds.local_dates())
    if len(date_range) == 2:
        start_date, end_date = date_range

sort_sel = st.sidebar.selectbox("Sort by", [f.value for f in SortField])
history_days = st.sidebar.slider(
    "History window (days)",
    min_value=config.min_history_days,
    max_value=config.max_history_days,
    value=config.history_days,
    step=1,
)

criteria = FilterCriteria(
    search=search or None,
    category=None if cat_sel == "(All)" else cat_sel,
    status=None if status_sel == "(Any)" else StockStatus(status_sel),
    quantity_bucket=None if bucket_sel == "(Any)" else QuantityBucket(bucket_sel),
    date_range=None if range_sel == "(Any)" else DateRange(range_sel),
    start_date=start_date,
    end_date=end_date,
)

# -----------------------------------------------------------------------------
# Fresh fetch + computation on every interaction
# -----------------------------------------------------------------------------
t0 = time.perf_counter()
view = load_inventory_view(da, criteria, sort_field=SortField(sort_sel))
t_view = (time.perf_counter() - t0) * 1000.0

# -----------------------------------------------------------------------------
# Status cards
# -----------------------------------------------------------------------------
c1, c2, c3 = st.columns(3)
c1.metric("Normal", view.counts[StockStatus.NORMAL])
c2.metric("Low", view.counts[StockStatus.LOW])
c3.metric("Critical", view.counts[StockStatus.CRITICAL])

with st.expander("Load timing (ms)"):
    st.write({"load_inventory_view": round(t_view, 2)})

# -----------------------------------------------------------------------------
# Snapshot table
# -----------------------------------------------------------------------------
st.markdown("### Current inventory")
table = pd.DataFrame(
    [
        {
            "Product": s.product_name,
            "Category": s.category,
            "Current": s.current_quantity,
            "Minimum": s.minimum,
            "Maximum": s.maximum,
            "Status": STATUS_LABELS[s.status],
            "Last updated": s.last_updated,
        }
        for s in view.filtered
    ]
)
st.dataframe(table, use_container_width=True)

# -----------------------------------------------------------------------------
# Product history
# -----------------------------------------------------------------------------
if view.filtered:
    st.markdown("### History")
    names = [f"{s.product_name} ({s.category})" for s in view.filtered]
    selected = view.filtered[names.index(st.selectbox("Product", names))]
    points = product_history(view.movements, selected, days=history_days)
    series = pd.DataFrame(
        {
            "timestamp": [p.timestamp for p in points],
            "Current": [p.quantity for p in points],
            "Minimum": selected.minimum,
            "Maximum": selected.maximum,
        }
    )
    st.line_chart(series, x="timestamp", y=["Current", "Minimum", "Maximum"], use_container_width=True)

    threshold = next((t for t in da.list_thresholds() if t.product_name == selected.product_name), None)
    if threshold is not None:
        with st.expander("Edit thresholds"):
            with st.form("threshold_form"):
                new_min = st.number_input("Minimum", min_value=0.0, value=float(threshold.minimum))
                new_max = st.number_input("Maximum", min_value=0.0, value=float(threshold.maximum))
                if st.form_submit_button("Save"):
                    try:
                        save_threshold(da, threshold.id, new_min, new_max)
                    except ValidationError as e:
                        st.error(f"Invalid thresholds: {e.errors()[0]['msg']}")
                    else:
                        st.success("Thresholds saved")
                        st.rerun()

# -----------------------------------------------------------------------------
# Reports
# -----------------------------------------------------------------------------
summary = load_report_summary(da)
if summary.by_branch:
    st.markdown("### Requests by branch")
    st.bar_chart(pd.Series(summary.by_branch, name="requests"))

    st.markdown("### Requests by category")
    st.bar_chart(pd.Series(summary.by_category, name="requests"))

    st.markdown("### Requests by month")
    monthly = pd.DataFrame({"month": list(summary.by_month), "requests": list(summary.by_month.values())})
    st.line_chart(monthly, x="month", y="requests", use_container_width=True)
