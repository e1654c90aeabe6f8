import streamlit as st
from .. import config

def apply_custom_css():
    """Injects the dashboard font, card and tab styling."""
    st.markdown(f"""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;600;800&display=swap');

        html, body, [class*="css"] {{
            font-family: 'Inter', sans-serif;
            color: {config.THEME_COLORS["text_main"]};
        }}

        .stApp {{
            background-color: {config.THEME_COLORS["background"]};
        }}

        h1 {{
            text-align: center;
            font-weight: 800;
        }}

        /* Chart and table card */
        div[data-testid="stVerticalBlockBorderWrapper"] {{
            background: #ffffff;
            border-radius: 12px;
            box-shadow: 0 4px 20px rgba(0,0,0,0.04);
        }}

        .stTabs [data-baseweb="tab-list"] {{
            gap: 24px;
        }}

        .status-message {{
            display: flex;
            justify-content: center;
            align-items: center;
            height: 400px;
            color: {config.THEME_COLORS["text_muted"]};
        }}

        .status-message.error {{
            color: {config.THEME_COLORS["error"]};
        }}
    </style>
    """, unsafe_allow_html=True)
