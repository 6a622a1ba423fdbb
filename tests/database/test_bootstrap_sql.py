from src.hr_attendance.hr_attendance.database.bootstrap import split_statements, strip_database_statements


def test_split_ignores_semicolons_in_literals_and_comments():
    sql = """
    -- settings; seeded below
    CREATE TABLE a (id INT);
    INSERT INTO a VALUES ('x;y');
    INSERT INTO a VALUES ('it\\'s;')
    """

    assert list(split_statements(sql)) == [
        "CREATE TABLE a (id INT)",
        "INSERT INTO a VALUES ('x;y')",
        "INSERT INTO a VALUES ('it\\'s;')",
    ]


def test_database_statements_are_removed():
    sql = "CREATE DATABASE IF NOT EXISTS hr;\nUSE hr;\nCREATE TABLE t (id INT);\n"

    assert list(split_statements(strip_database_statements(sql))) == ["CREATE TABLE t (id INT)"]
