# app/main.py

import streamlit as st
from dotenv import load_dotenv
from ui.login import login_page, logout
from ui.posts import posts_page
from ui.account import account_page, users_page


load_dotenv()


def main_page():
    st.title(f"안녕하세요, {st.session_state['username']}님!")

    st.sidebar.markdown("## 📋 메뉴")

    if st.sidebar.button("📝 내 게시글"):
        st.session_state["page"] = "posts"
    if st.sidebar.button("👥 사용자"):
        st.session_state["page"] = "users"
    if st.sidebar.button("👤 내 계정"):
        st.session_state["page"] = "account"
    if st.sidebar.button("🔓 로그아웃"):
        st.session_state["logout"] = True

    if st.session_state.get("logout"):
        logout()
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "posts")
    if page == "posts":
        posts_page()
    elif page == "users":
        users_page()
    elif page == "account":
        account_page()


if "access_token" not in st.session_state:
    login_page()
else:
    main_page()
