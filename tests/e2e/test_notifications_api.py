"""End-to-end tests for notification endpoints and the comment-to-notification flow."""

from uuid import uuid4

API = "/api/v1"


def post_comment(client, content, author_id):
    response = client.post(
        f"{API}/comments", json={"content": content, "author_id": author_id}
    )
    assert response.status_code == 201
    return response.json()["data"]


def list_notifications(client, user_id, **params):
    response = client.get(f"{API}/notifications/user/{user_id}", params=params)
    assert response.status_code == 200
    return response.json()


class TestCommentNotificationFlow:
    """Comments made through the API produce notifications."""

    def test_comment_then_reply_notifies_author(self, client):
        """A creates "Hi", B replies "Hey": A gets both notifications."""
        # Arrange
        alice = str(uuid4())
        bob = str(uuid4())

        # Act
        comment = post_comment(client, "Hi", alice)
        reply = client.post(
            f"{API}/comments/{comment['id']}/replies",
            json={"content": "Hey", "author_id": bob},
        ).json()["data"]
        client.drain_events()

        # Assert
        notifications = list_notifications(client, alice, sort_order="asc")["data"]
        assert [n["title"] for n in notifications] == ["Comment Created", "New Reply"]
        assert notifications[0]["type"] == "comment.created"
        assert notifications[0]["metadata"] == {"comment_id": comment["id"]}
        assert notifications[1]["type"] == "comment.replied"
        assert notifications[1]["metadata"] == {
            "comment_id": reply["id"],
            "parent_id": comment["id"],
            "reply_author_id": bob,
        }

        bob_titles = [n["title"] for n in list_notifications(client, bob)["data"]]
        assert "New Reply" not in bob_titles

    def test_unread_count_and_read_all(self, client):
        """Unread count drops to zero after marking all as read."""
        # Arrange
        alice = str(uuid4())
        post_comment(client, "One", alice)
        post_comment(client, "Two", alice)
        client.drain_events()

        # Act
        before = client.get(f"{API}/notifications/user/{alice}/unread-count")
        marked = client.patch(f"{API}/notifications/user/{alice}/read-all")
        after = client.get(f"{API}/notifications/user/{alice}/unread-count")

        # Assert
        assert before.json() == {"success": True, "data": {"unread_count": 2}}
        assert marked.json() == {"success": True, "data": {"marked_count": 2}}
        assert after.json()["data"]["unread_count"] == 0


class TestNotificationEndpoints:
    """Tests for single-notification endpoints."""

    def _notification(self, client):
        alice = str(uuid4())
        post_comment(client, "Hi", alice)
        client.drain_events()
        return list_notifications(client, alice)["data"][0]

    def test_get_notification(self, client):
        """A notification can be fetched by ID."""
        notification = self._notification(client)

        response = client.get(f"{API}/notifications/{notification['id']}")

        assert response.status_code == 200
        assert response.json()["data"] == notification

    def test_mark_as_read(self, client):
        """PATCH /read sets read and read_at."""
        notification = self._notification(client)

        response = client.patch(f"{API}/notifications/{notification['id']}/read")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["read"] is True
        assert data["read_at"] is not None

    def test_delete_notification(self, client):
        """Deleted notifications can no longer be fetched."""
        notification = self._notification(client)

        response = client.delete(f"{API}/notifications/{notification['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Notification deleted successfully",
        }
        missing = client.get(f"{API}/notifications/{notification['id']}")
        assert missing.status_code == 404

    def test_unknown_notification_returns_404(self, client):
        """Unknown notification IDs are reported as missing resources."""
        missing = uuid4()

        for response in (
            client.get(f"{API}/notifications/{missing}"),
            client.patch(f"{API}/notifications/{missing}/read"),
            client.delete(f"{API}/notifications/{missing}"),
        ):
            assert response.status_code == 404
            error = response.json()["error"]
            assert error["code"] == "RESOURCE_NOT_FOUND"
            assert error["context"]["resource"] == "Notification"

    def test_list_is_empty_for_new_user(self, client):
        """A user without notifications gets an empty page."""
        body = list_notifications(client, str(uuid4()))

        assert body["data"] == []
        assert body["meta"]["total"] == 0
        assert body["meta"]["total_pages"] == 0
