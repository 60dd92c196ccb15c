import asyncio

import pytest

from app.db.base import Base
from app.db.session import build_engine, build_sessionmaker
from app.users.repository import create_user
from app.videos import repository as repo
from app.videos.models import Video

from tests.conftest import auth, upload


def test_like_scenario(client, token):
    video = upload(client, token)
    assert video["likes"] == 0
    assert video["views"] == 0
    assert video["recommendation_score"] == 0

    r = client.post(f"/videos/{video['id']}/like", headers=auth(token))
    assert r.status_code == 200
    assert r.json()["likes"] == 1
    assert r.json()["recommendation_score"] == 1.0

    r = client.post(f"/videos/{video['id']}/like", headers=auth(token))
    assert r.json()["likes"] == 2
    assert r.json()["recommendation_score"] == 2.0


def test_like_missing_video_is_404(client, token):
    r = client.post("/videos/12345/like", headers=auth(token))
    assert r.status_code == 404
    assert r.json() == {"detail": "video not found"}


def test_like_requires_token(client, token):
    video = upload(client, token)
    r = client.post(f"/videos/{video['id']}/like")
    assert r.status_code == 401


def test_upload_stores_file_and_serves_it(client, token, settings):
    video = upload(client, token, content=b"bytes-of-video")
    assert video["url"].startswith("/videos/")
    assert video["url"].endswith(".mp4")

    r = client.get(video["url"])
    assert r.status_code == 200
    assert r.content == b"bytes-of-video"


def test_uploads_get_distinct_names(client, token):
    a = upload(client, token)
    b = upload(client, token)
    assert a["url"] != b["url"]


def test_upload_without_file_is_400(client, token):
    r = client.post("/videos", headers=auth(token), data={"caption": "sin archivo"})
    assert r.status_code == 400


def test_duet_appends_suffix(client, token):
    video = upload(client, token, caption="baile", path="/duets")
    assert video["caption"] == "baile (Duet)"
    assert video["likes"] == 0


def test_feed_is_newest_first(client, token):
    ids = [upload(client, token, caption=f"v{i}")["id"] for i in range(4)]
    r = client.get("/videos")
    assert r.status_code == 200
    assert [v["id"] for v in r.json()] == list(reversed(ids))
    stamps = [v["timestamp"] for v in r.json()]
    assert stamps == sorted(stamps, reverse=True)


def test_recommended_orders_by_score_and_caps_at_20(client, token):
    ids = [upload(client, token, caption=f"v{i}")["id"] for i in range(22)]
    liked = {ids[5]: 3, ids[10]: 1, ids[21]: 2}
    for vid, n in liked.items():
        for _ in range(n):
            client.post(f"/videos/{vid}/like", headers=auth(token))

    r = client.get("/recommended")
    assert r.status_code == 200
    body = r.json()
    assert len(body) == 20
    assert [v["id"] for v in body[:3]] == [ids[5], ids[21], ids[10]]
    scores = [v["recommendation_score"] for v in body]
    assert scores == sorted(scores, reverse=True)
    # empates en 0: orden de inserción
    assert [v["id"] for v in body[3:]] == [i for i in ids if i not in liked][:17]


def test_feed_and_recommended_are_independent(client, token):
    old = upload(client, token, caption="viejo")
    new = upload(client, token, caption="nuevo")
    client.post(f"/videos/{old['id']}/like", headers=auth(token))

    assert client.get("/videos").json()[0]["id"] == new["id"]
    assert client.get("/recommended").json()[0]["id"] == old["id"]


def test_empty_feeds(client):
    assert client.get("/videos").json() == []
    assert client.get("/recommended").json() == []


def test_unknown_route_is_generic_404(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert "detail" in r.json()


def _run(coro):
    return asyncio.run(coro)


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}"


def test_increment_like_recomputes_score_with_views(db_url):
    async def scenario():
        engine = build_engine(db_url)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        Session = build_sessionmaker(engine)
        try:
            async with Session() as db:
                user = await create_user(db, "v@x.com", "hash", "v")
                video = await repo.create_video(db, user.id, "/videos/x.mp4", "c")
                video.views = 25
                await db.commit()

                liked = await repo.increment_like(db, video.id)
                await db.commit()
                return liked.likes, liked.views, liked.recommendation_score
        finally:
            await engine.dispose()

    likes, views, score = _run(scenario())
    assert (likes, views) == (1, 25)
    assert score == pytest.approx(3.5)


def test_list_videos_by_user_only_returns_owner_videos(db_url):
    async def scenario():
        engine = build_engine(db_url)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        Session = build_sessionmaker(engine)
        try:
            async with Session() as db:
                a = await create_user(db, "a@x.com", "hash", "a")
                b = await create_user(db, "b@x.com", "hash", "b")
                await repo.create_video(db, a.id, "/videos/1.mp4", None)
                await repo.create_video(db, b.id, "/videos/2.mp4", None)
                await repo.create_video(db, a.id, "/videos/3.mp4", None)
                await db.commit()
                return [v.url for v in await repo.list_videos_by_user(db, a.id)]
        finally:
            await engine.dispose()

    assert sorted(_run(scenario())) == ["/videos/1.mp4", "/videos/3.mp4"]


def test_video_requires_existing_owner(db_url):
    from sqlalchemy.exc import IntegrityError

    async def scenario():
        engine = build_engine(db_url)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        Session = build_sessionmaker(engine)
        try:
            async with Session() as db:
                db.add(Video(user_id=999, url="/videos/x.mp4", caption=None))
                await db.flush()
        finally:
            await engine.dispose()

    with pytest.raises(IntegrityError):
        _run(scenario())


def test_concurrent_likes_are_not_lost(db_url):
    async def scenario():
        engine = build_engine(db_url)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        Session = build_sessionmaker(engine)
        try:
            async with Session() as db:
                user = await create_user(db, "c@x.com", "hash", "c")
                video = await repo.create_video(db, user.id, "/videos/c.mp4", None)
                await db.commit()
                video_id = video.id

            async def like_once():
                # cada like en su propia sesión, como requests distintas
                async with Session() as db:
                    await repo.increment_like(db, video_id)
                    await db.commit()

            await asyncio.gather(*(like_once() for _ in range(10)))

            async with Session() as db:
                final = await repo.get_video(db, video_id)
                return final.likes, final.recommendation_score
        finally:
            await engine.dispose()

    likes, score = _run(scenario())
    assert likes == 10
    assert score == pytest.approx(10.0)


def test_upload_failure_is_500_and_leaves_no_video(client, token, monkeypatch):
    def broken_save(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("app.videos.service.save_upload", broken_save)

    r = client.post(
        "/videos",
        headers=auth(token),
        files={"video": ("clip.mp4", b"x", "video/mp4")},
        data={"caption": "falla"},
    )
    assert r.status_code == 500
    assert r.json() == {"detail": "internal error"}
    assert client.get("/videos").json() == []
