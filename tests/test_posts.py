"""Tests for /api/post endpoints."""

from datetime import timedelta

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from blog_api.database.base import utc_now
from blog_api.models.comment import Comment
from blog_api.models.post import DEFAULT_POST_IMAGE, Post
from blog_api.models.user import User
from blog_api.services.posts import slugify


class TestSlugify:
    def test_spaces_become_dashes(self):
        assert slugify("My First Post") == "my-first-post"

    def test_punctuation_is_dropped(self):
        assert slugify("Hello, World! (2026)") == "hello-world-2026"


class TestCreatePost:
    """Test POST /api/post/create."""

    def test_admin_creates_post(self, login, admin: User):
        response = login(admin).post(
            "/api/post/create",
            json={"title": "My First Post", "content": "<p>Body</p>", "category": "python"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "My First Post"
        assert data["slug"] == "my-first-post"
        assert data["category"] == "python"
        assert data["image"] == DEFAULT_POST_IMAGE
        assert data["userId"] == admin.id

    def test_default_category(self, login, admin: User):
        response = login(admin).post(
            "/api/post/create", json={"title": "Plain", "content": "text"}
        )
        assert response.json()["category"] == "uncategorized"

    def test_non_admin_forbidden(self, login, reader: User):
        response = login(reader).post(
            "/api/post/create", json={"title": "Nope", "content": "text"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to create a post"

    def test_missing_fields(self, login, admin: User):
        response = login(admin).post("/api/post/create", json={"title": "No body"})

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide all required fields"

    def test_duplicate_title(self, login, admin: User, sample_post: Post):
        response = login(admin).post(
            "/api/post/create", json={"title": sample_post.title, "content": "again"}
        )

        assert response.status_code == 409


class TestGetPosts:
    """Test GET /api/post/getposts."""

    def _make_posts(self, session: Session, user_id: str) -> list[Post]:
        posts = [
            Post(
                user_id=user_id,
                title=f"Post {i}",
                content=f"content number {i}",
                slug=f"post-{i}",
                category="python" if i % 2 else "javascript",
            )
            for i in range(12)
        ]
        for i, post in enumerate(posts):
            post.updated_at = utc_now() - timedelta(minutes=60 - i)
        session.add_all(posts)
        session.commit()
        return posts

    def test_default_page(self, client: TestClient, session: Session, admin: User):
        self._make_posts(session, admin.id)

        response = client.get("/api/post/getposts")

        assert response.status_code == 200
        data = response.json()
        assert len(data["posts"]) == 9
        assert data["totalPosts"] == 12
        assert data["lastMonthPosts"] == 12
        # Newest update first
        assert data["posts"][0]["title"] == "Post 11"

    def test_order_asc_and_paging(self, client: TestClient, session: Session, admin: User):
        self._make_posts(session, admin.id)

        response = client.get(
            "/api/post/getposts", params={"order": "asc", "startIndex": 9}
        )

        titles = [p["title"] for p in response.json()["posts"]]
        assert titles == ["Post 9", "Post 10", "Post 11"]

    def test_filters(self, client: TestClient, session: Session, admin: User):
        posts = self._make_posts(session, admin.id)

        by_category = client.get("/api/post/getposts", params={"category": "python"})
        assert len(by_category.json()["posts"]) == 6

        by_slug = client.get("/api/post/getposts", params={"slug": "post-3"})
        assert [p["title"] for p in by_slug.json()["posts"]] == ["Post 3"]

        by_id = client.get("/api/post/getposts", params={"postId": posts[5].id})
        assert [p["id"] for p in by_id.json()["posts"]] == [posts[5].id]

        by_user = client.get("/api/post/getposts", params={"userId": "someone-else"})
        assert by_user.json()["posts"] == []
        assert by_user.json()["totalPosts"] == 12

    def test_search_term(self, client: TestClient, session: Session, admin: User):
        self._make_posts(session, admin.id)

        response = client.get("/api/post/getposts", params={"searchTerm": "NUMBER 7"})

        assert [p["title"] for p in response.json()["posts"]] == ["Post 7"]

    def test_last_month_count(self, client: TestClient, session: Session, sample_post: Post):
        sample_post.created_at = utc_now() - timedelta(days=60)
        session.commit()

        data = client.get("/api/post/getposts").json()

        assert data["totalPosts"] == 1
        assert data["lastMonthPosts"] == 0


class TestDeletePost:
    """Test DELETE /api/post/deletepost/{postId}/{userId}."""

    def test_owner_admin_deletes(
        self, login, admin: User, sample_post: Post, sample_comment: Comment, session: Session
    ):
        response = login(admin).delete(f"/api/post/deletepost/{sample_post.id}/{admin.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "The post has been deleted"}
        session.expire_all()
        assert session.query(Post).count() == 0
        # Comments go with their post
        assert session.query(Comment).count() == 0

    def test_non_admin_forbidden(self, login, reader: User, sample_post: Post):
        response = login(reader).delete(f"/api/post/deletepost/{sample_post.id}/{reader.id}")

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to delete this post"

    def test_admin_must_match_path_user(
        self, login, admin: User, reader: User, sample_post: Post
    ):
        response = login(admin).delete(f"/api/post/deletepost/{sample_post.id}/{reader.id}")
        assert response.status_code == 403

    def test_missing_post(self, login, admin: User):
        response = login(admin).delete(f"/api/post/deletepost/nonexistent-id/{admin.id}")
        assert response.status_code == 404


class TestUpdatePost:
    """Test PUT /api/post/updatepost/{postId}/{userId}."""

    def test_update(self, login, admin: User, sample_post: Post):
        response = login(admin).put(
            f"/api/post/updatepost/{sample_post.id}/{admin.id}",
            json={"content": "<p>Edited</p>", "category": "news"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "<p>Edited</p>"
        assert data["category"] == "news"
        assert data["title"] == "Hello World"
        assert data["slug"] == "hello-world"

    def test_non_admin_forbidden(self, login, reader: User, sample_post: Post):
        response = login(reader).put(
            f"/api/post/updatepost/{sample_post.id}/{reader.id}", json={"content": "x"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "You are not allowed to update this post"

    def test_empty_title_rejected(self, login, admin: User, sample_post: Post):
        response = login(admin).put(
            f"/api/post/updatepost/{sample_post.id}/{admin.id}", json={"title": ""}
        )
        assert response.status_code == 400
