# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from services.api import login_user, register_user

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout():
    cookies.clear()
    cookies.save()


def login_page():
    st.title("🔐 로그인")

    if "access_token" not in st.session_state:
        if "access_token" in cookies and cookies.get("user_id"):
            st.session_state["access_token"] = cookies["access_token"]
            st.session_state["user_id"] = cookies["user_id"]
            st.session_state["username"] = cookies["username"]
            st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("아이디")
        password = st.text_input("비밀번호", type="password")
        submitted = st.form_submit_button("로그인")

    if submitted:
        with st.spinner("로그인 중..."):
            result = login_user(username, password)
            if result["status"] == "error":
                st.error(f"❌ 로그인 실패: {result['message']}")
            else:
                token = result["data"]["token"]
                user = result["data"]["user"]
                st.session_state["access_token"] = token
                st.session_state["user_id"] = user["id"]
                st.session_state["username"] = user["username"]
                cookies["access_token"] = token
                cookies["user_id"] = user["id"]
                cookies["username"] = user["username"]
                cookies.save()

                st.success("✅ 로그인 성공!")
                st.rerun()

    if st.button("회원가입"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 회원가입")

    new_user = st.text_input("새 아이디", key="new_user")
    new_name = st.text_input("이름", key="new_name")
    new_pass = st.text_input("새 비밀번호", type="password", key="new_pass")

    if st.button("가입하기"):
        with st.spinner("회원가입 처리 중..."):
            result = register_user(new_user, new_pass, new_name)
            if result["status"] == "success":
                st.success("🎉 회원가입 성공! 이제 로그인해주세요.")
                st.session_state["show_register"] = False
                st.rerun()
            else:
                st.error(f"❌ 실패: {result['message']}")

    if st.button("← 로그인으로 돌아가기"):
        st.session_state["show_register"] = False
        st.rerun()
