"""
Tests for the informational page content and its filters
"""
from codemurf.content import about, changelog, community, events, feature_requests
from codemurf.content import filter_events, filter_feature_requests, filter_releases


def _ids(entries):
    return [entry["id"] for entry in entries]


class TestFeatureRequests:

    def test_all_and_recent_keep_everything(self):
        assert _ids(filter_feature_requests("all")) == [1, 2, 3, 4, 5, 6]
        assert _ids(filter_feature_requests("recent")) == [1, 2, 3, 4, 5, 6]

    def test_popular_means_more_than_150_votes(self):
        assert _ids(filter_feature_requests("popular")) == [1, 2, 3]

    def test_status_filters(self):
        assert _ids(filter_feature_requests("in-progress")) == [1, 5]
        assert _ids(filter_feature_requests("completed")) == [4]
        assert _ids(filter_feature_requests("planned")) == [3]

    def test_unknown_filter_keeps_everything(self):
        assert len(filter_feature_requests("trending")) == 6

    def test_search_matches_title_description_and_tags(self):
        assert _ids(filter_feature_requests("all", "workflow")) == [4]
        assert _ids(filter_feature_requests("all", "COLLAB")) == [2]

    def test_search_combines_with_filter(self):
        assert _ids(filter_feature_requests("popular", "collab")) == [2]
        assert filter_feature_requests("completed", "collab") == []


class TestChangelog:

    def test_all(self):
        assert len(filter_releases()) == 6
        assert filter_releases("")[0]["version"] == "v2.8.0"

    def test_by_type(self):
        assert [r["version"] for r in filter_releases("major")] == ["v2.8.0", "v2.7.0", "v2.6.0"]
        assert [r["version"] for r in filter_releases("patch")] == ["v2.6.8"]

    def test_change_types_are_known(self):
        for release in changelog.RELEASES:
            for change in release["changes"]:
                assert change["type"] in changelog.CHANGE_TYPES


class TestEvents:

    def test_all(self):
        assert len(filter_events("all")) == 6

    def test_by_category(self):
        assert _ids(filter_events("workshop")) == [2, 6]
        assert _ids(filter_events("hackathon")) == [5]
        assert filter_events("gala") == []

    def test_every_event_type_has_a_badge(self):
        for event in events.UPCOMING_EVENTS:
            assert event["type"] in events.EVENT_TYPE_CLASSES


def test_static_pages_have_content():
    assert len(about.TEAM_MEMBERS) == 6
    assert len(about.MILESTONES) == 6
    assert community.COMMUNITY_CHANNELS
    assert feature_requests.DEVELOPMENT_PROCESS
