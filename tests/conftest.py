import pytest

DUMP = (
    "USE [MyDb]\n"
    "GO\n"
    "/****** Object:  StoredProcedure [dbo].[GetUsers]    Script Date: 01/02/2024 10:00:00 ******/\n"
    "CREATE PROCEDURE dbo.GetUsers AS SELECT 1\n"
    "GO\n"
    "/****** Object:  View [dbo].[V1]    Script Date: 01/02/2024 10:00:00 ******/\n"
    "CREATE VIEW dbo.V1 AS SELECT 1\n"
)

@pytest.fixture
def dump_text():
    return DUMP

@pytest.fixture
def dump_file(tmp_path):
    filepath = tmp_path / "MyDb.sql"
    filepath.write_bytes(DUMP.encode("utf-8"))
    return filepath
