"""Tests for /api/comment endpoints."""

from datetime import timedelta

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from blog_api.database.base import utc_now
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User


class TestCreateComment:
    """Test POST /api/comment/create."""

    def test_create(self, login, reader: User, sample_post: Post):
        response = login(reader).post(
            "/api/comment/create",
            json={"content": "Great read", "postId": sample_post.id, "userId": reader.id},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "Great read"
        assert data["postId"] == sample_post.id
        assert data["userId"] == reader.id
        assert data["likes"] == []
        assert data["numberOfLikes"] == 0

    def test_cannot_comment_as_someone_else(
        self, login, reader: User, admin: User, sample_post: Post
    ):
        response = login(reader).post(
            "/api/comment/create",
            json={"content": "Spoofed", "postId": sample_post.id, "userId": admin.id},
        )

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to create this comment"

    def test_missing_content(self, login, reader: User, sample_post: Post):
        response = login(reader).post(
            "/api/comment/create",
            json={"postId": sample_post.id, "userId": reader.id},
        )
        assert response.status_code == 400

    def test_too_long(self, login, reader: User, sample_post: Post):
        response = login(reader).post(
            "/api/comment/create",
            json={"content": "x" * 201, "postId": sample_post.id, "userId": reader.id},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Comment must be 200 characters or fewer"

    def test_unknown_post(self, login, reader: User):
        response = login(reader).post(
            "/api/comment/create",
            json={"content": "Hello?", "postId": "nonexistent-id", "userId": reader.id},
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"


class TestGetPostComments:
    def test_newest_first(self, client: TestClient, session: Session, sample_post: Post, reader: User):
        old = Comment(content="old", post_id=sample_post.id, user_id=reader.id)
        old.created_at = utc_now() - timedelta(hours=2)
        new = Comment(content="new", post_id=sample_post.id, user_id=reader.id)
        session.add_all([old, new])
        session.commit()

        response = client.get(f"/api/comment/getPostComments/{sample_post.id}")

        assert response.status_code == 200
        assert [c["content"] for c in response.json()] == ["new", "old"]

    def test_no_comments(self, client: TestClient, sample_post: Post):
        response = client.get(f"/api/comment/getPostComments/{sample_post.id}")
        assert response.json() == []


class TestLikeComment:
    """Test PUT /api/comment/likeComment/{commentId}."""

    def test_like_then_unlike(self, login, admin: User, sample_comment: Comment):
        admin_client = login(admin)

        liked = admin_client.put(f"/api/comment/likeComment/{sample_comment.id}")
        assert liked.status_code == 200
        assert liked.json()["likes"] == [admin.id]
        assert liked.json()["numberOfLikes"] == 1

        unliked = admin_client.put(f"/api/comment/likeComment/{sample_comment.id}")
        assert unliked.json()["likes"] == []
        assert unliked.json()["numberOfLikes"] == 0

    def test_likes_from_two_users(self, login, admin: User, reader: User, sample_comment: Comment):
        login(admin).put(f"/api/comment/likeComment/{sample_comment.id}")
        response = login(reader).put(f"/api/comment/likeComment/{sample_comment.id}")

        assert set(response.json()["likes"]) == {admin.id, reader.id}
        assert response.json()["numberOfLikes"] == 2

    def test_missing_comment(self, login, reader: User):
        response = login(reader).put("/api/comment/likeComment/nonexistent-id")

        assert response.status_code == 404
        assert response.json()["message"] == "Comment not found"


class TestEditComment:
    """Test PUT /api/comment/editComment/{commentId}."""

    def test_owner_edits(self, login, reader: User, sample_comment: Comment):
        response = login(reader).put(
            f"/api/comment/editComment/{sample_comment.id}", json={"content": "Edited"}
        )

        assert response.status_code == 200
        assert response.json()["content"] == "Edited"

    def test_admin_edits(self, login, admin: User, sample_comment: Comment):
        response = login(admin).put(
            f"/api/comment/editComment/{sample_comment.id}", json={"content": "Moderated"}
        )
        assert response.status_code == 200

    def test_other_user_forbidden(self, login, create_user, sample_comment: Comment):
        other = create_user(username="otheruser", email="other@example.com")

        response = login(other).put(
            f"/api/comment/editComment/{sample_comment.id}", json={"content": "Mine now"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to edit this comment"


class TestDeleteComment:
    """Test DELETE /api/comment/deleteComment/{commentId}."""

    def test_owner_deletes(self, login, reader: User, sample_comment: Comment, session: Session):
        response = login(reader).delete(f"/api/comment/deleteComment/{sample_comment.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Comment has been deleted"}
        session.expire_all()
        assert session.query(Comment).count() == 0

    def test_other_user_forbidden(self, login, create_user, sample_comment: Comment):
        other = create_user(username="otheruser", email="other@example.com")

        response = login(other).delete(f"/api/comment/deleteComment/{sample_comment.id}")

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to delete this comment"


class TestGetComments:
    """Test GET /api/comment/getcomments."""

    def test_admin_lists(self, login, admin: User, sample_comment: Comment):
        response = login(admin).get("/api/comment/getcomments")

        assert response.status_code == 200
        data = response.json()
        assert [c["id"] for c in data["comments"]] == [sample_comment.id]
        assert data["totalComments"] == 1
        assert data["lastMonthComments"] == 1

    def test_non_admin_forbidden(self, login, reader: User):
        response = login(reader).get("/api/comment/getcomments")

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to get all comments"
