"""
Unit tests for InsertQuery, UpdateQuery, DeleteQuery and SqlQuery assembly.
"""

from query_hub.infrastructure.sql import DeleteQuery, InsertQuery, SqlQuery, UpdateQuery
from query_hub.infrastructure.sql.statements import TableMode


class TestInsertQuery:
    def test_statements(self):
        """A new INSERT should target INSERT INTO with no values."""
        query = InsertQuery()

        assert query.get_into().get_mode() == TableMode.INSERT
        assert query.get_insert_values().get_data() == {}
        assert query.get_on_duplicate_key_update() is None

    def test_build(self):
        """INSERT should list columns and bind values in order."""
        query = InsertQuery().into("Users").values({"uid": 10, "name": "john"})

        assert query.build() == "INSERT INTO `Users` (`uid`,`name`) VALUES (?,?)"
        assert query.get_values() == [10, "john"]

    def test_values_merge(self):
        """Later values should overwrite earlier ones by key."""
        query = InsertQuery().into("Users").values({"uid": 10}).values({"uid": 11, "name": "a"})

        assert query.build() == "INSERT INTO `Users` (`uid`,`name`) VALUES (?,?)"
        assert query.get_values() == [11, "a"]

    def test_on_duplicate_key_update(self):
        """The ON DUPLICATE KEY UPDATE fragment should be appended verbatim."""
        query = (
            InsertQuery()
            .into("Counters")
            .values({"id": 1, "hits": 1})
            .on_duplicate_key_update("hits = hits + 1")
        )

        assert query.build() == (
            "INSERT INTO `Counters` (`id`,`hits`) VALUES (?,?) ON DUPLICATE KEY UPDATE hits = hits + 1"
        )
        assert query.get_values() == [1, 1]

    def test_clone(self):
        """A clone should be equal and independent of the original."""
        query = InsertQuery().into("Users").values({"uid": 1}).on_duplicate_key_update("uid = uid")
        clone = query.clone()

        assert clone == query

        clone.values({"name": "x"})
        assert query.build() == "INSERT INTO `Users` (`uid`) VALUES (?) ON DUPLICATE KEY UPDATE uid = uid"

    def test_equality_includes_on_duplicate(self):
        """The ON DUPLICATE KEY UPDATE fragment should take part in equality."""
        a = InsertQuery().into("Users").on_duplicate_key_update("uid = uid")
        b = InsertQuery().into("Users")

        assert a != b


class TestUpdateQuery:
    def test_statements(self):
        """A new UPDATE should target the UPDATE table mode."""
        assert UpdateQuery().get_table().get_mode() == TableMode.UPDATE

    def test_build(self):
        """UPDATE should render SET, WHERE, ORDER BY and LIMIT in order."""
        query = (
            UpdateQuery()
            .table("Users")
            .values({"name": "john", "balance": 5})
            .where("uid", 10)
            .order_by("uid", "ASC")
            .limit(1)
        )

        assert query.build() == (
            "UPDATE `Users` SET `name` = ?, `balance` = ? WHERE `uid` = ? ORDER BY `uid` ASC LIMIT 1"
        )
        assert query.get_values() == ["john", 5, 10]

    def test_set_values_precede_where_values(self):
        """SET values should be bound before WHERE values whatever the call order."""
        query = UpdateQuery().table("Users").where("group", ["a", "b"]).values({"disabled": True})

        assert query.build() == "UPDATE `Users` SET `disabled` = ? WHERE `group` IN (?,?)"
        assert query.get_values() == [True, "a", "b"]

    def test_clone_is_independent(self):
        """Conditions added to a clone should not reach the original."""
        query = UpdateQuery().table("Users").values({"a": 1})
        clone = query.clone().where("uid", 2)

        assert query.build() == "UPDATE `Users` SET `a` = ?"
        assert clone.build() == "UPDATE `Users` SET `a` = ? WHERE `uid` = ?"


class TestDeleteQuery:
    def test_statements(self):
        """A new DELETE should target the DELETE FROM table mode."""
        assert DeleteQuery().get_from().get_mode() == TableMode.DELETE

    def test_full_build(self):
        """DELETE should render WHERE, ORDER BY and LIMIT in order."""
        query = (
            DeleteQuery()
            .from_("Users")
            .where("uid", 10)
            .between("created_at", "2016-04-01", "2016-04-30")
            .not_between("balance", 100, 150)
            .not_("disabled")
            .or_where("admin", True)
            .order_by("uid", "ASC")
            .limit(100)
        )

        assert query.build() == (
            "DELETE FROM `Users` WHERE `uid` = ? AND `created_at` BETWEEN ? AND ?"
            " AND `balance` NOT BETWEEN ? AND ? AND `disabled` <> ? OR `admin` = ?"
            " ORDER BY `uid` ASC LIMIT 100"
        )
        assert query.get_values() == [10, "2016-04-01", "2016-04-30", 100, 150, True, True]

    def test_clone(self):
        """A clone should compare equal to the original."""
        query = DeleteQuery().from_("Users").where("uid", 1)

        assert query.clone() == query


class TestSqlQuery:
    def test_raw(self):
        """Raw SQL should be returned verbatim with its parameters."""
        query = SqlQuery().raw("SELECT * FROM Users WHERE uid = ?").parameters([10])

        assert query.build() == "SELECT * FROM Users WHERE uid = ?"
        assert query.get_values() == [10]

    def test_defaults(self):
        """A new raw query should have no SQL and no parameters."""
        query = SqlQuery()

        assert query.build() == ""
        assert query.get_values() == []

    def test_equality(self):
        """Raw queries should compare by SQL and parameters."""
        a = SqlQuery().raw("SELECT 1").parameters([1])
        b = SqlQuery().raw("SELECT 1").parameters([1])

        assert a == b
        assert a != SqlQuery().raw("SELECT 1")

    def test_clone(self):
        """Parameters set on a clone should not reach the original."""
        query = SqlQuery().raw("SELECT ?").parameters([1])
        clone = query.clone()

        assert clone == query
        clone.parameters([2])
        assert query.get_values() == [1]
