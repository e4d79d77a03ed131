"""Tests for hierarchical keys."""

from simplecache import CacheConfig, Expiry, HierarchicalCache


class TestDefaults:
    def test_values(self, hcache):
        assert hcache.base == "/"
        assert hcache.delimiter == "/"
        assert hcache.placeholder == "_"

    def test_custom_delimiter_sets_root(self, cache):
        hc = HierarchicalCache(cache, delimiter=".", placeholder="-")
        assert hc.base == "."
        assert hc.resolved_key("a.b") == "..a-b"

    def test_custom_base(self, cache):
        hc = HierarchicalCache(cache, base="app")
        assert hc.resolved_key("x") == "app/x"


class TestPushPop:
    def test_round_trip(self, hcache):
        assert hcache.push("a") == "//a"
        assert hcache.push("b") == "//a/b"
        assert hcache.resolved_key("x") == "//a/b/x"

        assert hcache.pop() == "b"
        assert hcache.base == "//a"
        assert hcache.pop() == "a"
        assert hcache.base == "/"
        assert hcache.pop() is None
        assert hcache.base == "/"

    def test_pop_single_layer(self, cache):
        hc = HierarchicalCache(cache, base="app")
        assert hc.pop() == "app"
        assert hc.base == ""
        assert hc.pop() is None
        assert hc.base == ""

    def test_push_escapes_delimiter(self, hcache):
        hcache.push("a/b")
        assert hcache.base == "//a_b"
        assert hcache.pop() == "a_b"

    def test_key_escapes_delimiter(self, hcache):
        assert hcache.resolved_key("x/y") == "//x_y"


class TestSeparators:
    def test_delimiter_equal_to_placeholder(self, hcache):
        assert not hcache.set_delimiter("_")
        assert hcache.delimiter == "/"

    def test_placeholder_equal_to_delimiter(self, hcache):
        assert not hcache.set_placeholder("/")
        assert hcache.placeholder == "_"

    def test_empty(self, hcache):
        assert not hcache.set_delimiter("")
        assert not hcache.set_placeholder("")

    def test_change(self, hcache):
        assert hcache.set_placeholder("-")
        assert hcache.set_delimiter(":")
        assert hcache.escape_segment("a:b/c") == "a-b/c"

    def test_change_moves_root(self, hcache):
        assert hcache.set_delimiter(":")
        assert hcache.base == ":"
        assert hcache.pop() is None
        assert hcache.base == ":"

    def test_change_keeps_pushed_base(self, hcache):
        hcache.push("a")
        assert hcache.set_delimiter(":")
        assert hcache.base == "//a"


class TestCacheOperations:
    def test_stores_under_resolved_key(self, hcache, cache):
        hcache.push("a")
        hcache.push("b")
        hcache.set("x", "foo")

        assert hcache.get("x") == "foo"
        assert cache.get("//a/b/x") == "foo"
        assert cache.get("x") is None

    def test_layers_are_separate(self, hcache):
        hcache.push("a")
        hcache.set("x", "in a")
        hcache.pop()
        hcache.push("b")
        assert hcache.get("x") is None
        assert not hcache.exists("x")

    def test_delete(self, hcache, cache):
        hcache.set("x", "foo")
        assert hcache.delete("x")
        assert cache.get_entry("//x") is None

    def test_timestamps(self, hcache, clock):
        hcache.set("x", "foo", lifetime=0)
        assert hcache.get_timestamp("x") == clock.now
        assert hcache.get_expiration("x") is Expiry.NEVER
        assert hcache.get_expiration("missing") is None

    def test_expiry_and_purge(self, hcache, clock, count_rows):
        hcache.set_default_lifetime(1)
        hcache.set("x", "foo")
        clock.advance(2)
        assert hcache.get("x") is None
        hcache.purge_expired()
        assert count_rows() == 0

    def test_from_config(self, conn):
        config = CacheConfig(table="tree", base="root", delimiter=".", placeholder="-")
        hc = HierarchicalCache.from_config(config, conn)
        hc.push("a.b")
        hc.set("x", 1)
        assert hc.resolved_key("x") == "root.a-b.x"
        assert hc.cache.table == "tree"
        assert hc.get("x") == 1

    def test_swapped_separators(self, cache):
        hc = HierarchicalCache(cache, delimiter="_", placeholder="/")
        assert hc.delimiter == "_"
        assert hc.placeholder == "/"

    def test_rejected_separators_fall_back(self, cache):
        hc = HierarchicalCache(cache, delimiter="-", placeholder="-")
        assert hc.delimiter == "/"
        assert hc.placeholder == "_"
        assert hc.base == "/"
