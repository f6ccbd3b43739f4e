import asyncio
import html
from contextlib import contextmanager
from typing import List, Optional

import altair as alt
import pandas as pd
import streamlit as st

from catalog.charts import dataset_count_chart
from catalog.data import DATA_DIR, departments_frame
from catalog.formatting import (
    additional_info,
    card_header_html,
    dataset_label,
    display_name,
    logo_placeholder_html,
)
from catalog.logo import AssetLogo, LogoSource, RemoteLogo, SymbolLogo
from catalog.models import Department
from catalog.state import DepartmentLoader, Empty, Failed, Idle, Loaded, Loading, LoadMode

alt.data_transformers.disable_max_rows()

ASSET_DIR = DATA_DIR / "assets"
GRID_COLUMNS = 3
MODE_LABELS = {"Generated Async": LoadMode.GENERATED, "Local JSON": LoadMode.JSON}


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .breadcrumb {color: #6b7280;font-size: 0.9rem;margin-bottom: 2px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #f3f4f6;
               box-shadow: 0 1px 2px rgba(0,0,0,0.1); margin-bottom: 12px; min-height: 180px; text-align: center;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;white-space: pre-line;}
        .card-subtitle {font-size: 0.9rem;color: #6b7280;}
        .logo-symbol {font-size: 0.8rem;color: #2563eb;border: 1px dashed #93c5fd;border-radius: 8px;padding: 18px 6px;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, subtitle: Optional[str] = None):
    container = st.container()
    container.markdown(card_header_html(title, subtitle or ""), unsafe_allow_html=True)
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def render_page_header(title: str, breadcrumb: str, export_df: Optional[pd.DataFrame] = None):
    inject_base_styles()
    c1, c2 = st.columns([7, 3])
    with c1:
        st.markdown(
            f"<div class='app-top-bar'><div class='breadcrumb'>{html.escape(breadcrumb)}</div><div class='page-title'>{html.escape(title)}</div></div>",
            unsafe_allow_html=True,
        )
    with c2:
        btn_cols = st.columns(2)
        if btn_cols[0].button("Refresh"):
            run_load(force=True)
        if export_df is not None and not export_df.empty:
            btn_cols[1].download_button(
                "Export CSV",
                data=export_df.to_csv(index=False).encode("utf-8"),
                file_name="departments.csv",
                mime="text/csv",
            )


def render_logo(source: LogoSource, size: int = 60):
    if isinstance(source, RemoteLogo):
        st.image(source.url, width=size)
    elif isinstance(source, AssetLogo):
        matches = sorted(ASSET_DIR.glob(f"{source.name}.*")) if ASSET_DIR.exists() else []
        if matches:
            st.image(str(matches[0]), width=size)
        else:
            st.markdown(logo_placeholder_html(source.name), unsafe_allow_html=True)
    elif isinstance(source, SymbolLogo):
        st.markdown(logo_placeholder_html(source.name), unsafe_allow_html=True)


# ---------- state ----------
def get_loader() -> DepartmentLoader:
    if "loader" not in st.session_state:
        st.session_state["loader"] = DepartmentLoader()
    return st.session_state["loader"]


def run_load(force: bool = False):
    loader = get_loader()
    if force or isinstance(loader.state, Idle):
        asyncio.run(loader.load(st.session_state.get("load_mode", LoadMode.GENERATED)))


def open_detail(department_id: str):
    st.session_state["selected_id"] = department_id


def close_detail():
    st.session_state.pop("selected_id", None)


# ---------- pages ----------
def render_grid(departments: List[Department]):
    for start in range(0, len(departments), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, dept in zip(cols, departments[start:start + GRID_COLUMNS]):
            with col:
                with card(dept.name, dataset_label(dept.dataset_count)):
                    render_logo(dept.logo_source)
                    st.button("Open", key=f"open-{dept.id}", on_click=open_detail, args=(str(dept.id),))


def render_detail(dept: Department):
    st.button("← CA Departments", on_click=close_detail)
    render_page_header(display_name(dept.name), "CA Departments / Detail")
    render_logo(dept.logo_source, size=120)
    st.markdown(f"## {dept.name}".replace("\n", "  \n"))
    st.caption(dataset_label(dept.dataset_count, "Available"))
    st.divider()
    st.subheader("Function / Description")
    st.write(dept.description)
    st.subheader("Additional Information")
    st.write(additional_info(dept.name))
    st.button("Visit Department Website (Placeholder)", disabled=True)


def render_home(loader: DepartmentLoader):
    export_df = departments_frame(loader.departments)
    render_page_header("CA Departments", "Home", export_df=export_df)
    state = loader.state

    if isinstance(state, Idle):
        with st.spinner("Loading Departments..."):
            run_load()
        st.rerun()
    elif isinstance(state, Loading):
        st.info("Loading Departments...")
    elif isinstance(state, Failed):
        st.error("Failed to load departments")
        st.caption(state.message)
        st.button("Retry", on_click=run_load, kwargs={"force": True}, type="primary")
    elif isinstance(state, Empty):
        st.info("No departments found.")
    elif isinstance(state, Loaded):
        render_grid(loader.departments)
        with st.expander("Datasets by department", expanded=False):
            st.altair_chart(dataset_count_chart(export_df), use_container_width=True)


# ---------- UI setup ----------
st.set_page_config(page_title="CA Departments", layout="wide")
inject_base_styles()

with st.sidebar:
    st.markdown("### Load Data From")
    choice = st.radio("Load Data From", list(MODE_LABELS), index=0, label_visibility="collapsed")
    mode = MODE_LABELS[choice]
    if st.session_state.get("load_mode") != mode:
        st.session_state["load_mode"] = mode
        close_detail()
        run_load(force=True)

loader = get_loader()
selected = loader.find(st.session_state["selected_id"]) if "selected_id" in st.session_state else None
if selected is not None:
    render_detail(selected)
else:
    render_home(loader)
