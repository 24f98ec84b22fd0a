"""
Unit tests for the pydantic schemas.
"""
import pytest
from pydantic import ValidationError

from article_portal_api.app.schemas.article import Article
from article_portal_api.app.schemas.user import UserRead, UserUpdate


def make_article(**overrides):
    article = {
        "title": "Attention Is All You Need",
        "abstract": "The dominant sequence transduction models...",
        "publication_year": "2017",
        "end_page": 11,
        "doi": "10.48550/arXiv.1706.03762",
        "affiliation": "Google Brain",
        "pubtype": "Conference Paper",
        "keywords": ["transformer", "attention"],
        "author": ["Vaswani", "Shazeer"],
    }
    article.update(overrides)
    return article


class TestArticle:
    """Test suite for the Article schema."""

    def test_valid_article(self):
        article = Article.model_validate(make_article())
        assert article.keywords == ["transformer", "attention"]
        assert article.end_page == 11

    @pytest.mark.parametrize("field", ["title", "abstract", "doi", "keywords", "author"])
    def test_required_fields(self, field):
        data = make_article()
        del data[field]
        with pytest.raises(ValidationError):
            Article.model_validate(data)

    def test_title_length_limit(self):
        with pytest.raises(ValidationError):
            Article.model_validate(make_article(title="t" * 2048))


class TestUserSchemas:
    """Test suite for the user schemas."""

    def test_update_tracks_only_supplied_fields(self):
        update = UserUpdate.model_validate({"name": "B"})
        assert update.model_dump(exclude_unset=True) == {"name": "B"}

    def test_read_serializes_id_alias(self):
        user = UserRead.model_validate(
            {"_id": "abc", "name": "A", "email": "a@x.com", "phone": 1, "password": "d", "__v": 0}
        )
        dumped = user.model_dump(by_alias=True)
        assert dumped["_id"] == "abc"
        assert "__v" not in dumped
        assert dumped["visitHistory"] == []
