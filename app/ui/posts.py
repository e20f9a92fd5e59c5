# app/ui/posts.py

import streamlit as st
from services.api import create_post, delete_post, list_posts, update_post


def posts_page():
    st.title("📝 게시글")

    user_id = st.session_state["user_id"]

    result = list_posts(user_id)
    if result["status"] == "error":
        st.error(result["message"])
        return

    posts = result["data"]
    if not posts:
        st.info("아직 게시글이 없습니다.")

    for post in posts:
        with st.expander(f"{post['title']} · {post['author'] or '익명'}"):
            st.write(post["content"])
            st.caption(f"ID: {post['id']}")

            with st.form(f"edit_{post['id']}"):
                title = st.text_input("제목", value=post["title"])
                author = st.text_input("작성자", value=post["author"])
                content = st.text_area("내용", value=post["content"])
                col1, col2 = st.columns(2)
                save = col1.form_submit_button("수정")
                remove = col2.form_submit_button("🗑️ 삭제")

            if save:
                res = update_post(user_id, post["id"], title=title, author=author, content=content)
                _report(res, "수정 완료")
            if remove:
                res = delete_post(user_id, post["id"])
                _report(res, "삭제 완료")

    st.divider()
    st.subheader("새 게시글")
    with st.form("create_post", clear_on_submit=True):
        title = st.text_input("제목")
        author = st.text_input("작성자", value=st.session_state.get("username", ""))
        content = st.text_area("내용")
        submitted = st.form_submit_button("작성")

    if submitted:
        if not title.strip():
            st.warning("제목을 입력해주세요.")
        else:
            res = create_post(user_id, author, title, content)
            _report(res, "작성 완료")


def _report(result, message):
    if result["status"] == "success":
        st.success(message)
        st.rerun()
    else:
        st.error(result["message"])
