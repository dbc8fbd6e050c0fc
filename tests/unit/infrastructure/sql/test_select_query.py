"""
Unit tests for SelectQuery assembly.
"""

import copy

from query_hub.infrastructure.sql import SelectQuery
from query_hub.infrastructure.sql.statements import (
    FromStatement,
    LimitStatement,
    OrderStatement,
    SelectStatement,
    UnionStatement,
    WhereStatement,
)


def build_full_query() -> SelectQuery:
    return (
        SelectQuery()
        .from_("Users")
        .join("FbProfiles fb", "uid = fb.uid")
        .where("uid", 10)
        .between("created_at", "2016-04-01", "2016-04-30")
        .not_between("balance", 100, 150)
        .not_("disabled")
        .or_where("admin", True)
        .having("first_name", "something")
        .group_by("last_name")
        .order_by("first_name", "ASC")
        .limit(100, 10)
        .union(SelectQuery().from_("Users2").where("username", "john"))
    )


class TestSelectQueryClauses:
    def test_default_statements(self):
        """A new query should own one builder per clause."""
        query = SelectQuery()

        assert isinstance(query.get_select(), SelectStatement)
        assert isinstance(query.get_from(), FromStatement)
        assert isinstance(query.get_where(), WhereStatement)
        assert query.get_where().is_having() is False
        assert isinstance(query.get_group_by(), OrderStatement)
        assert query.get_group_by().is_group_by() is True
        assert query.get_having().is_having() is True
        assert isinstance(query.get_order_by(), OrderStatement)
        assert isinstance(query.get_limit(), LimitStatement)
        assert isinstance(query.get_union(), UnionStatement)

    def test_select(self):
        """select() should set the field list."""
        query = SelectQuery().select("uid, name")

        assert query.get_select().get_fields() == ["uid", "name"]

    def test_select_replaces_fields(self):
        """A second select() should replace the earlier fields."""
        query = SelectQuery().select("uid").select(["name"])

        assert query.get_select().get_fields() == ["name"]

    def test_aggregates(self):
        """Aggregate helpers should replace the field list with one function call."""
        assert SelectQuery().count().get_select().get_fields() == ["COUNT(*)"]
        assert SelectQuery().count("uid").get_select().get_fields() == ["COUNT(uid)"]
        assert SelectQuery().sum("balance").get_select().get_fields() == ["SUM(balance)"]
        assert SelectQuery().average("balance").get_select().get_fields() == ["AVG(balance)"]
        assert SelectQuery().min("balance").get_select().get_fields() == ["MIN(balance)"]
        assert SelectQuery().max("balance").get_select().get_fields() == ["MAX(balance)"]

    def test_where_infix(self):
        """Infix conditions should take the operator in the middle."""
        query = SelectQuery().where_infix("balance", ">", 10).or_where_infix("uid", 5)

        assert query.build() == "SELECT * WHERE `balance` > ? OR `uid` = ?"
        assert query.get_values() == [10, 5]

    def test_where_infix_fragment(self):
        """An infix condition with one argument should be a fragment."""
        query = SelectQuery().where_infix("notes IS NULL")

        assert query.build() == "SELECT * WHERE notes IS NULL"

    def test_not(self):
        """not_() should compare with <> and default the value to True."""
        query = SelectQuery().not_("disabled").not_("group", "admin")

        assert query.build() == "SELECT * WHERE `disabled` <> ? AND `group` <> ?"
        assert query.get_values() == [True, "admin"]

    def test_exists(self):
        """exists() should add an EXISTS subquery."""
        query = (
            SelectQuery()
            .from_("Users")
            .exists(lambda q: q.select("uid").from_("Posts").where("Posts.uid = Users.uid"))
        )

        assert query.build() == (
            "SELECT * FROM `Users` WHERE EXISTS (SELECT `uid` FROM `Posts` WHERE Posts.uid = Users.uid)"
        )

    def test_not_exists(self):
        """not_exists() should add a NOT EXISTS subquery."""
        query = SelectQuery().from_("Users").not_exists(lambda q: q.from_("Bans").where("Bans.uid = Users.uid"))

        assert query.build() == (
            "SELECT * FROM `Users` WHERE NOT EXISTS (FROM `Bans` WHERE Bans.uid = Users.uid)"
        )

    def test_limit_ignores_non_numeric(self):
        """A non-numeric limit should keep the earlier limit."""
        query = SelectQuery().limit(100, 10).limit("hello")

        assert query.get_limit().get_limit() == 100
        assert query.get_limit().get_start() == 10

    def test_limit_ignores_infinity(self):
        """An infinite limit should keep the earlier limit."""
        query = SelectQuery().from_("Users").limit(100, 10).limit(float("inf"))

        assert query.build() == "SELECT * FROM `Users` LIMIT 10,100"

    def test_join_types(self):
        """join() should accept a join type and USING columns."""
        query = SelectQuery().from_("Users").join("Posts", using="uid", join_type="LEFT JOIN")

        assert query.build() == "SELECT * FROM `Users` LEFT JOIN `Posts` USING (`uid`)"

    def test_unsafe_join_table_omitted(self):
        """A join on an unsafe table should not render a dangling JOIN."""
        query = SelectQuery().from_("a").join("b;", on="a.x=b.x")

        assert query.build() == "SELECT * FROM `a`"


class TestSelectQueryBuild:
    def test_full_build(self):
        """Every clause should render in SQL order with values in placeholder order."""
        query = build_full_query()

        assert query.build() == (
            "SELECT * FROM `Users` JOIN `FbProfiles` `fb` ON uid = fb.uid"
            " WHERE `uid` = ? AND `created_at` BETWEEN ? AND ?"
            " AND `balance` NOT BETWEEN ? AND ? AND `disabled` <> ? OR `admin` = ?"
            " GROUP BY `last_name` HAVING `first_name` = ? ORDER BY `first_name` ASC"
            " LIMIT 10,100 UNION SELECT * FROM `Users2` WHERE `username` = ?"
        )
        assert query.get_values() == [
            10,
            "2016-04-01",
            "2016-04-30",
            100,
            150,
            True,
            True,
            "something",
            "john",
        ]

    def test_str_builds(self):
        """str() should return the built SQL."""
        query = SelectQuery().from_("Users")

        assert str(query) == "SELECT * FROM `Users`"

    def test_build_is_idempotent(self):
        """Building twice should give the same SQL and values."""
        query = build_full_query()

        first = (query.build(), query.get_values())
        second = (query.build(), query.get_values())

        assert first == second

    def test_placeholder_count_matches_values(self):
        """Every placeholder should have exactly one bound value."""
        query = build_full_query().where("group", ["a", "b", "c"]).where("deleted_at", None)

        sql = query.build()

        assert sql.count("?") == len(query.get_values())

    def test_where_is_stripped_without_select(self):
        """Without a SELECT list the WHERE keyword should be dropped."""
        query = SelectQuery()
        query.get_select().clear_fields()
        query.where("uid", 1)

        assert query.build() == "`uid` = ?"
        assert query.get_values() == [1]

    def test_values_before_build_are_empty(self):
        """Values should only be collected by build()."""
        assert SelectQuery().where("uid", 1).get_values() == []


class TestSelectQueryClone:
    def test_clone_is_equal(self):
        """A clone should compare equal to the original."""
        query = build_full_query()

        assert query.clone() == query

    def test_clone_is_independent(self):
        """Changing a clone should not change the original."""
        query = SelectQuery().from_("Users").where("uid", 1)
        clone = query.clone()
        clone.where("name", "john").limit(5).order_by("uid")

        assert query.build() == "SELECT * FROM `Users` WHERE `uid` = ?"
        assert clone.build() == "SELECT * FROM `Users` WHERE `uid` = ? AND `name` = ? ORDER BY `uid` LIMIT 5"
        assert clone != query

    def test_clone_copies_unions(self):
        """Union queries should be copied along with the clone."""
        query = SelectQuery().from_("A").union(SelectQuery().from_("B"))
        clone = query.clone()
        clone.get_union().get_queries()[0][0].where("x", 1)

        assert query.build() == "SELECT * FROM `A` UNION SELECT * FROM `B`"

    def test_clone_shares_executor(self, mock_executor):
        """A clone should keep the same executor."""
        query = SelectQuery().set_executor(mock_executor)

        assert query.clone().get_executor() is mock_executor

    def test_copy_module(self):
        """copy.copy and copy.deepcopy should both give independent clauses."""
        query = SelectQuery().from_("Users")

        shallow = copy.copy(query)
        deep = copy.deepcopy(query)
        shallow.where("uid", 1)

        assert deep == query
        assert query.build() == "SELECT * FROM `Users`"
