import httpx
import pytest


HTML_PAGE = """
<html>
<head>
    <title>Regular Title</title>
    <meta property="og:title" content="Open Graph Title">
    <meta property="og:type" content="article">
    <meta property="og:description" content="Open Graph Description">
    <meta property="og:site_name" content="Example Site">
    <meta property="og:image" content="/images/cover.jpg">
    <meta property="og:image:width" content="1200">
    <meta property="og:image:height" content="630">
    <meta name="author" content="Jane Doe">
    <link rel="icon" href="/favicon.ico">
</head>
<body><p>Hello</p></body>
</html>
"""


@pytest.fixture
def html_page():
    return HTML_PAGE


@pytest.fixture
def make_client():
    """Build an httpx.AsyncClient whose requests are answered by a handler function."""
    def _make_client(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make_client
