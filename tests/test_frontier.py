from contact_scout.crawler.frontier import CrawlFrontier


def test_priority_served_before_normal():
    frontier = CrawlFrontier()
    frontier.push("https://a.com/blog")
    frontier.push("https://a.com/about")
    frontier.push("https://a.com/contact", priority=True)
    assert frontier.pop() == "https://a.com/contact"
    assert frontier.pop() == "https://a.com/blog"
    assert frontier.pop() == "https://a.com/about"
    assert frontier.pop() is None


def test_newest_priority_entry_goes_first():
    frontier = CrawlFrontier()
    frontier.push("https://a.com/contact", priority=True)
    frontier.push("https://a.com/support", priority=True)
    assert list(frontier) == ["https://a.com/support", "https://a.com/contact"]


def test_push_is_insert_once():
    frontier = CrawlFrontier()
    assert frontier.push("https://a.com/x")
    assert not frontier.push("https://a.com/x")
    assert not frontier.push("https://a.com/x", priority=True)
    assert len(frontier) == 1


def test_pop_marks_visited_and_blocks_requeue():
    frontier = CrawlFrontier()
    frontier.push("https://a.com/")
    assert frontier.pop() == "https://a.com/"
    assert frontier.visited == {"https://a.com/"}
    assert frontier.visited_count == 1
    assert not frontier.push("https://a.com/")
    assert not frontier
