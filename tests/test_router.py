from frpconf.core.router import RouteKind, classify, path_segments

AUTHORITY = "frpconf.config"


def test_root_lists_all():
    assert classify("content://frpconf.config", AUTHORITY).kind == RouteKind.LIST_ALL
    assert classify("content://frpconf.config/", AUTHORITY).kind == RouteKind.LIST_ALL


def test_two_segments_is_single_item():
    route = classify("content://frpconf.config/frpc/home.toml", AUTHORITY)
    assert route.kind == RouteKind.SINGLE_ITEM
    assert route.type_token == "frpc"
    assert route.name == "home.toml"


def test_other_segment_counts_are_unrecognized():
    assert classify("content://frpconf.config/frpc", AUTHORITY).kind == RouteKind.UNRECOGNIZED
    assert (
        classify("content://frpconf.config/frpc/a/b", AUTHORITY).kind == RouteKind.UNRECOGNIZED
    )


def test_foreign_authority_is_unrecognized():
    assert classify("content://other.config/frpc/a.toml", AUTHORITY).kind == RouteKind.UNRECOGNIZED


def test_scheme_is_ignored():
    assert classify("file://frpconf.config/frpc/a.toml", AUTHORITY).kind == RouteKind.SINGLE_ITEM


def test_segments_are_decoded_and_empty_ones_dropped():
    assert path_segments("//frpc//my%20config.toml/") == ["frpc", "my config.toml"]
