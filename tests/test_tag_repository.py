from techblog.domain import Article, Tag


def _article(article_repo, title="title") -> int:
    return article_repo.create(Article(title=title, body="body")).last_insert_id


def test_list_by_article_id_orders_by_tag_id(article_repo, tag_repo, seed) -> None:
    article_id = _article(article_repo)
    db_tag, api_tag = seed.tag("db"), seed.tag("api")
    seed.link(article_id, api_tag, db_tag)

    assert tag_repo.list_by_article_id(article_id) == [
        Tag(id=db_tag, name="db"),
        Tag(id=api_tag, name="api"),
    ]


def test_list_by_article_id_without_links_is_empty(article_repo, tag_repo) -> None:
    assert tag_repo.list_by_article_id(_article(article_repo)) == []


def test_list_map_contains_every_requested_id(article_repo, tag_repo, seed, statement_log) -> None:
    tagged = _article(article_repo, "tagged")
    untagged = _article(article_repo, "untagged")
    sql = seed.tag("sql")
    seed.link(tagged, sql)
    statement_log.clear()

    tag_map = tag_repo.list_map_by_article_ids([tagged, untagged, 404])

    assert tag_map == {
        tagged: [Tag(id=sql, name="sql")],
        untagged: [],
        404: [],
    }
    assert len(statement_log.selects()) == 1


def test_list_map_shares_tags_between_articles(article_repo, tag_repo, seed) -> None:
    first, second = _article(article_repo), _article(article_repo)
    shared = seed.tag("shared")
    seed.link(first, shared)
    seed.link(second, shared)

    tag_map = tag_repo.list_map_by_article_ids([first, second, first])

    assert list(tag_map) == [first, second]
    assert tag_map[first] == tag_map[second] == [Tag(id=shared, name="shared")]


def test_list_map_with_no_ids_skips_query(tag_repo, statement_log) -> None:
    assert tag_repo.list_map_by_article_ids([]) == {}
    assert statement_log.selects() == []
