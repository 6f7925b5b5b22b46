import textwrap
import time
import types

import pytest


SAMPLE_FEED = textwrap.dedent(
    """\
    <?xml version="1.0" encoding="UTF-8"?>
    <rss version="2.0">
      <channel>
        <title>Adnkronos - Sport</title>
        <description>Le notizie di sport</description>
        <link>https://www.adnkronos.com/sport</link>
        <item>
          <title>Prima notizia</title>
          <link>https://www.adnkronos.com/sport/1</link>
          <description><![CDATA[<p>Calcio <b>serie A</b></p>&nbsp;oggi]]></description>
          <pubDate>Mon, 19 Oct 2026 08:00:00 +0200</pubDate>
        </item>
        <item>
          <title>Seconda notizia</title>
          <link>https://www.adnkronos.com/sport/2</link>
          <description>&lt;img src="a.jpg"/&gt;Tennis</description>
          <pubDate>Mon, 19 Oct 2026 09:30:00 +0200</pubDate>
        </item>
        <item>
          <title>Terza notizia</title>
          <link>https://www.adnkronos.com/sport/3</link>
          <description>Basket</description>
          <pubDate>Mon, 19 Oct 2026 10:15:00 +0200</pubDate>
        </item>
      </channel>
    </rss>
    """
)


@pytest.fixture
def sample_feed_xml():
    return SAMPLE_FEED


@pytest.fixture
def make_session():
    """Build a fake HTTP session that answers every GET with one response."""

    def factory(status_code=200, content=b"", reason="OK", error=None, delay=0.0):
        calls = []

        def get(url, timeout=None):
            calls.append({"url": url, "timeout": timeout})
            if delay:
                time.sleep(delay)
            if error is not None:
                raise error
            return types.SimpleNamespace(
                status_code=status_code, reason=reason, content=content
            )

        return types.SimpleNamespace(get=get, calls=calls)

    return factory
