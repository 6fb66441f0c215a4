import pytest


@pytest.mark.benchmark(group="parse", disable_gc=True)
def test_benchmark_decompose(benchmark):
    from rawurl import decompose

    def run_benchmark():
        url = decompose("https://user:pass@[2001:db8::1]:8443/x/..;/%2e%2e/?a=1&a=2#top")
        return url.full_url

    assert benchmark(run_benchmark) == "https://user:pass@[2001:db8::1]:8443/x/..;/%2e%2e/?a=1&a=2#top"


@pytest.mark.benchmark(group="update", disable_gc=True)
def test_benchmark_update(benchmark, url):
    def run_benchmark():
        url.update("path", "/..%2f/etc/passwd")
        url.update("port", "9000")
        return url.request_uri

    assert benchmark(run_benchmark) == "/..%2f/etc/passwd?q=1&q=2#top"
