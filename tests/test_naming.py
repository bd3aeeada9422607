"""Tests for the naming module."""

import pytest

from swagger_ts.naming import (
    DuplicatePathParameterError,
    build_url_getter_name,
    build_url_template,
    derive_url_getter,
    extract_path_params,
    split_words,
    to_pascal_case,
)


class TestPascalCase:
    """Test word splitting and PascalCasing."""

    def test_separators(self):
        assert to_pascal_case(["user-groups", "by", "{groupId}"]) == "UserGroupsByGroupId"

    def test_camel_humps(self):
        assert split_words("petOwnerId") == ["pet", "Owner", "Id"]

    def test_acronyms_flatten(self):
        assert to_pascal_case("HTTPServer") == "HttpServer"

    def test_digits(self):
        assert to_pascal_case(["v2", "items"]) == "V2Items"

    def test_single_string(self):
        assert to_pascal_case("get_users") == "GetUsers"

    def test_non_ascii_letters_kept(self):
        assert split_words("cafèÜber") == ["cafè", "Über"]
        assert to_pascal_case(["café", "über"]) == "CaféÜber"

    def test_acronym_before_word(self):
        assert split_words("HTTPServer2Go") == ["HTTP", "Server", "2", "Go"]


class TestUrlGetterName:
    """Test getter name generation from HTTP method + path segments."""

    def test_collection(self):
        assert build_url_getter_name("get", ["users"]) == "getUsers"

    def test_placeholder_reads_as_by(self):
        assert build_url_getter_name("get", ["users", "{id}"]) == "getUsersById"

    def test_nested(self):
        assert build_url_getter_name("post", ["users", "{id}", "avatar"]) == "postUsersByIdAvatar"

    def test_valid_identifier(self):
        name = build_url_getter_name("delete", ["files", "{base64-name}", "v1.2"])
        assert name.isidentifier()


class TestUrlTemplate:
    """Test template literal rendering."""

    def test_interpolates_params(self):
        assert build_url_template(["users", "{id}"], "/api/v1") == "`/api/v1/users/${id}`"

    def test_empty_prefix(self):
        assert build_url_template(["users"], "") == "`/users`"


class TestPathParams:
    """Test placeholder extraction."""

    def test_order(self):
        assert extract_path_params(["users", "{userId}", "posts", "{postId}"]) == ["userId", "postId"]

    def test_no_params(self):
        assert extract_path_params(["users"]) == []

    def test_duplicate_rejected(self):
        with pytest.raises(DuplicatePathParameterError) as exc_info:
            extract_path_params(["a", "{id}", "b", "{id}"])
        assert exc_info.value.name == "id"
        assert isinstance(exc_info.value, ValueError)


class TestDeriveUrlGetter:
    """Test the full URL getter derivation."""

    def test_get_by_id(self):
        getter = derive_url_getter("get", ["users", "{id}"], "/api/v1")
        assert getter == {
            "code": "export const getUsersById = ({id}) => `/api/v1/users/${id}`",
            "name": "getUsersById",
            "params_code": "{id}",
            "params": ["id"],
        }

    def test_no_params(self):
        getter = derive_url_getter("get", ["users"], "/api/v1")
        assert getter["code"] == "export const getUsers = () => `/api/v1/users`"
        assert getter["params_code"] == ""

    def test_multiple_params(self):
        getter = derive_url_getter("put", ["users", "{userId}", "posts", "{postId}"], "")
        assert getter["name"] == "putUsersByUserIdPostsByPostId"
        assert getter["params_code"] == "{userId,postId}"
