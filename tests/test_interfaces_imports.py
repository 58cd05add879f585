def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import lokitext.core.interfaces as I

    assert hasattr(I, "CodecProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "MultiPatternSearchProtocol")
    assert hasattr(I, "SubstringSearchProtocol")


def test_builtin_codecs_satisfy_protocol():
    from lokitext.core.interfaces import CodecProtocol
    from lokitext.encoding import CodecRegistry

    reg = CodecRegistry.default()
    for name in reg.names():
        assert isinstance(reg.get(name), CodecProtocol)


def test_public_api_is_flat():
    import lokitext

    for name in lokitext.__all__:
        assert hasattr(lokitext, name), name
