from core.stats import favorite_blog, total_likes
from models.blog import Blog


def make_blogs(*likes):
    return [
        Blog(title=f"blog {i}", author=f"author {i}", url=f"http://example.com/{i}", likes=count)
        for i, count in enumerate(likes)
    ]


def test_total_likes_of_empty_list_is_zero():
    assert total_likes([]) == 0


def test_total_likes_of_single_blog():
    assert total_likes(make_blogs(5)) == 5


def test_total_likes_of_many_blogs():
    assert total_likes(make_blogs(7, 5, 12, 10, 0, 2)) == 36


def test_favorite_of_empty_list_is_none():
    assert favorite_blog([]) is None


def test_favorite_is_most_liked():
    assert favorite_blog(make_blogs(7, 12, 5)) == {
        "title": "blog 1",
        "author": "author 1",
        "likes": 12,
    }


def test_favorite_tie_goes_to_latest():
    assert favorite_blog(make_blogs(3, 9, 9))["title"] == "blog 2"
    assert favorite_blog(make_blogs(9, 9, 3))["title"] == "blog 1"
