from top10.viewer import LeaderboardViewer

async def test_viewer_against_api(asgi_client):
    for name, score in [("Bob", 80), ("Alice", 100), ("Carol", 90)]:
        response = await asgi_client.post("/players/add_post", json={"name": name, "score": score})
        assert response.status_code == 200

    viewer = LeaderboardViewer(asgi_client)
    result = await viewer.initialize()

    assert result.ok
    assert viewer.container.element_id == "table_top10"
    assert viewer.container.content == (
        "<tr><td>1</td><td>Alice</td><td>100</td></tr>"
        "<tr><td>2</td><td>Carol</td><td>90</td></tr>"
        "<tr><td>3</td><td>Bob</td><td>80</td></tr>"
    )

async def test_viewer_against_missing_route(asgi_client):
    viewer = LeaderboardViewer(asgi_client)
    viewer.config = viewer.config.model_copy(update={"path": "/players/nope"})

    result = await viewer.initialize()

    assert not result.ok
    assert result.error.status == 404
    assert viewer.container.content == ""
