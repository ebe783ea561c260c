"""Tests for the post service."""

import pytest
import pytest_asyncio

from modules.posts.interfaces import IPostService
from modules.posts.exceptions import (
    CommentNotFoundError,
    PostAccessDeniedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
)
from modules.users.exceptions import UserNotFoundError
from shared.models import AuthenticatedUser


async def register_user(user_service, user_repository, name: str, email: str) -> AuthenticatedUser:
    await user_service.register(name, email, "secret1")
    record = await user_repository.get_by_email(email)
    return AuthenticatedUser(id=record.id)


@pytest_asyncio.fixture
async def ada(user_service, user_repository) -> AuthenticatedUser:
    return await register_user(user_service, user_repository, "Ada", "ada@x.com")


@pytest_asyncio.fixture
async def bob(user_service, user_repository) -> AuthenticatedUser:
    return await register_user(user_service, user_repository, "Bob", "bob@x.com")


class TestCreateAndRead:
    def test_implements_interface(self, post_service):
        assert isinstance(post_service, IPostService)

    @pytest.mark.asyncio
    async def test_create_snapshots_author(self, post_service, ada):
        post = await post_service.create(ada, "hello")

        assert post.user == ada.id
        assert post.text == "hello"
        assert post.name == "Ada"
        assert post.avatar.startswith("https://www.gravatar.com/avatar/")
        assert post.likes == []
        assert post.comments == []

    @pytest.mark.asyncio
    async def test_create_for_deleted_author(self, post_service, user_service, ada):
        await user_service.delete_user(ada.id)

        with pytest.raises(UserNotFoundError):
            await post_service.create(ada, "hello")

    @pytest.mark.asyncio
    async def test_list_newest_first(self, post_service, ada):
        await post_service.create(ada, "first")
        await post_service.create(ada, "second")

        posts = await post_service.list_all()

        assert [p.text for p in posts] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_get_post_not_found(self, post_service):
        with pytest.raises(PostNotFoundError):
            await post_service.get_post("507f1f77bcf86cd799439011")


class TestDelete:
    @pytest.mark.asyncio
    async def test_owner_can_delete(self, post_service, ada):
        post = await post_service.create(ada, "hello")

        await post_service.delete(post.id, ada)

        assert await post_service.list_all() == []

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, post_service, ada, bob):
        post = await post_service.create(ada, "hello")

        with pytest.raises(PostAccessDeniedError):
            await post_service.delete(post.id, bob)

        assert (await post_service.get_post(post.id)).text == "hello"

    @pytest.mark.asyncio
    async def test_delete_missing(self, post_service, ada):
        with pytest.raises(PostNotFoundError):
            await post_service.delete("507f1f77bcf86cd799439011", ada)


class TestLikes:
    @pytest.mark.asyncio
    async def test_like_inserts_at_head(self, post_service, ada, bob):
        post = await post_service.create(ada, "hello")

        await post_service.like(post.id, ada)
        likes = await post_service.like(post.id, bob)

        assert [l.user for l in likes] == [bob.id, ada.id]

    @pytest.mark.asyncio
    async def test_like_twice(self, post_service, ada):
        post = await post_service.create(ada, "hello")
        await post_service.like(post.id, ada)

        with pytest.raises(PostAlreadyLikedError):
            await post_service.like(post.id, ada)

        assert len((await post_service.get_post(post.id)).likes) == 1

    @pytest.mark.asyncio
    async def test_like_race_lost(self, post_service, post_repository, ada):
        """A conditional update that matches nothing is reported as already liked."""
        post = await post_service.create(ada, "hello")

        async def no_match(post_id, user_id):
            return None

        post_repository.add_like = no_match

        with pytest.raises(PostAlreadyLikedError):
            await post_service.like(post.id, ada)

    @pytest.mark.asyncio
    async def test_like_missing_post(self, post_service, ada):
        with pytest.raises(PostNotFoundError):
            await post_service.like("507f1f77bcf86cd799439011", ada)

    @pytest.mark.asyncio
    async def test_unlike(self, post_service, ada, bob):
        post = await post_service.create(ada, "hello")
        await post_service.like(post.id, ada)
        await post_service.like(post.id, bob)

        likes = await post_service.unlike(post.id, ada)

        assert [l.user for l in likes] == [bob.id]

    @pytest.mark.asyncio
    async def test_unlike_not_liked(self, post_service, ada):
        post = await post_service.create(ada, "hello")

        with pytest.raises(PostNotLikedError) as exc_info:
            await post_service.unlike(post.id, ada)
        assert exc_info.value.message == "Post has not yet been liked"


class TestComments:
    @pytest.mark.asyncio
    async def test_add_comment_carries_author(self, post_service, ada, bob):
        post = await post_service.create(ada, "hello")

        await post_service.add_comment(post.id, ada, "first")
        comments = await post_service.add_comment(post.id, bob, "second")

        assert [c.text for c in comments] == ["second", "first"]
        assert comments[0].name == "Bob"
        assert comments[0].user == bob.id
        assert comments[0].created_at > comments[1].created_at

    @pytest.mark.asyncio
    async def test_add_comment_missing_post(self, post_service, ada):
        with pytest.raises(PostNotFoundError):
            await post_service.add_comment("507f1f77bcf86cd799439011", ada, "hi")

    @pytest.mark.asyncio
    async def test_remove_comment(self, post_service, ada, bob):
        post = await post_service.create(ada, "hello")
        comments = await post_service.add_comment(post.id, bob, "hi")

        assert await post_service.remove_comment(post.id, comments[0].id) == []

    @pytest.mark.asyncio
    async def test_remove_unknown_comment(self, post_service, ada):
        post = await post_service.create(ada, "hello")

        with pytest.raises(CommentNotFoundError) as exc_info:
            await post_service.remove_comment(post.id, "507f1f77bcf86cd799439011")
        assert exc_info.value.message == "Comment does not exist"
