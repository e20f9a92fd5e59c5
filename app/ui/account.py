# app/ui/account.py

import streamlit as st
from services.api import delete_user, get_account, list_users, update_user


def account_page():
    st.title("👤 내 계정")

    user_id = st.session_state["user_id"]
    token = st.session_state["access_token"]

    account = get_account(user_id, token)
    if account["status"] == "error":
        st.error(f"세션이 만료되었습니다: {account['message']}")
        if st.button("다시 로그인"):
            st.session_state["logout"] = True
            st.rerun()
        return

    user = account["data"]["user"]
    st.write(f"**아이디:** {user['username']}")
    st.write(f"**이름:** {user['name']}")
    st.write(f"**게시글 수:** {len(user['posts'])}")

    with st.form("update_profile"):
        username = st.text_input("새 아이디", value=user["username"])
        name = st.text_input("새 이름", value=user["name"])
        password = st.text_input("새 비밀번호 (선택)", type="password")
        submitted = st.form_submit_button("저장")

    if submitted:
        res = update_user(user_id, username=username, name=name, password=password)
        if res["status"] == "success":
            st.session_state["username"] = res["data"]["username"]
            st.success("저장 완료")
        else:
            st.error(res["message"])

    with st.expander("⚠️ 계정 삭제"):
        if st.button("계정 삭제"):
            res = delete_user(user_id)
            if res["status"] == "success":
                st.session_state["logout"] = True
                st.rerun()
            else:
                st.error(res["message"])


def users_page():
    st.title("👥 사용자 목록")

    result = list_users()
    if result["status"] == "error":
        st.error(result["message"])
        return

    for user in result["data"]:
        st.markdown(f"**{user['name'] or user['username']}** (@{user['username']})")
        for post in user["posts"]:
            st.markdown(f"- {post['title']}")
