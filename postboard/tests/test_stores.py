import pytest
from datetime import timedelta

from postboard.stores.post_store import PostStore
from postboard.stores.comment_store import CommentStore
from postboard.stores.user_store import UserStore


@pytest.mark.asyncio
async def test_post_create_defaults(test_db, alice):
    post = await PostStore(test_db).create(author_id=alice.id, text="hello")

    assert post.id
    assert post.author_id == alice.id
    assert post.image is None
    assert post.likes == []
    assert post.comment_count == 0
    assert post.created_at is not None
    assert post.updated_at is not None


@pytest.mark.asyncio
async def test_post_round_trip_is_unchanged_by_read(test_db, alice, bob):
    store = PostStore(test_db)
    post = await store.create(author_id=alice.id, text="hello", image="/uploads/a.png")
    post.likes = [bob.id]
    post.comment_count = 3
    post = await store.save(post)
    created_at, updated_at = post.created_at, post.updated_at
    post_id = post.id

    test_db.expire_all()
    fetched = await store.find_by_id(post_id)

    assert fetched.text == "hello"
    assert fetched.image == "/uploads/a.png"
    assert fetched.likes == [bob.id]
    assert fetched.comment_count == 3
    assert fetched.created_at == created_at
    assert fetched.updated_at == updated_at


@pytest.mark.asyncio
async def test_find_missing_returns_none(test_db):
    assert await PostStore(test_db).find_by_id("missing") is None
    assert await CommentStore(test_db).find_by_id("missing") is None


@pytest.mark.asyncio
async def test_list_all_newest_first(test_db, alice):
    store = PostStore(test_db)
    older = await store.create(author_id=alice.id, text="older")
    newer = await store.create(author_id=alice.id, text="newer")
    older.created_at = newer.created_at - timedelta(minutes=5)
    await store.save(older)

    posts = await store.list_all()

    assert [p.id for p in posts] == [newer.id, older.id]


@pytest.mark.asyncio
async def test_comments_by_post_newest_first_and_grouped(test_db, alice, bob):
    posts = PostStore(test_db)
    comments = CommentStore(test_db)
    first = await posts.create(author_id=alice.id, text="first")
    second = await posts.create(author_id=alice.id, text="second")
    empty = await posts.create(author_id=alice.id, text="no comments")

    old = await comments.create(post_id=first.id, author_id=bob.id, text="old")
    new = await comments.create(post_id=first.id, author_id=alice.id, text="new")
    other = await comments.create(post_id=second.id, author_id=bob.id, text="other")
    old.created_at = new.created_at - timedelta(minutes=1)
    await comments.save(old)

    assert [c.id for c in await comments.find_by_post(first.id)] == [new.id, old.id]

    grouped = await comments.find_by_posts([first.id, second.id, empty.id])
    assert [c.id for c in grouped[first.id]] == [new.id, old.id]
    assert [c.id for c in grouped[second.id]] == [other.id]
    assert grouped[empty.id] == []


@pytest.mark.asyncio
async def test_find_by_posts_with_no_ids(test_db):
    assert await CommentStore(test_db).find_by_posts([]) == {}


@pytest.mark.asyncio
async def test_comment_delete(test_db, alice):
    post = await PostStore(test_db).create(author_id=alice.id, text="p")
    comments = CommentStore(test_db)
    comment = await comments.create(post_id=post.id, author_id=alice.id, text="c")

    await comments.delete(comment)

    assert await comments.find_by_id(comment.id) is None
    assert await comments.find_by_post(post.id) == []


@pytest.mark.asyncio
async def test_user_find_many(test_db, alice, bob):
    users = await UserStore(test_db).find_many([alice.id, bob.id, "ghost"])

    assert set(users) == {alice.id, bob.id}
    assert users[alice.id].email == "alice@example.com"
    assert await UserStore(test_db).find_many([]) == {}
