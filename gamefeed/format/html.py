from jinja2 import Environment
from html import unescape
from datetime import datetime, timezone

# Scraped values keep their entities as captured; decode them here so autoescape encodes exactly once.
_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
_env.filters["unescape"] = unescape

_HEAD = """
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
"""

HTML_TMPL = _env.from_string("""
<!doctype html>
<html lang="en">
<head>""" + _HEAD + """
  <title>Gaming News Feed</title>
  <style>
    body { margin:0; padding:0; font-family: 'Inter', sans-serif; background:#004D4D; color:#E0E0E0; }
    .container { max-width: 1200px; margin: 0 auto; padding: 20px; }
    .header { text-align: center; margin-bottom: 30px; }
    .header h1 { font-size: 32px; margin-bottom: 10px; }
    .status { text-align: center; margin-bottom: 20px; font-size: 16px; }
    .news-section { background: rgba(0,0,0,0.3); padding: 20px; border-radius: 10px; }
    .news-section h2 { font-size: 24px; margin-bottom: 20px; color:#40E0D0; }
    .page-title { font-size: 18px; margin-bottom: 15px; color:#40E0D0; }
    .articles-list { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 20px; }
    .article-item { background: rgba(0,0,0,0.2); border-radius: 8px; overflow: hidden; transition: transform 0.2s;
                    cursor: pointer; text-decoration: none; color: inherit; }
    .article-item:hover { transform: translateY(-2px); }
    .article-image { width: 100%; height: 140px; object-fit: cover; display: block; }
    .article-title { padding: 15px; font-size: 14px; line-height: 1.4; }
    .footer { margin-top: 16px; font-size: 12px; opacity: .7; text-align: center; }
  </style>
</head>
<body>
  <div class="container">
    <div class="header"><h1>Gaming News Feed</h1></div>
    <div class="status">
    {% if feed.is_sample %}
      Could not reach {{ feed.url }}; showing sample data. ({{ feed.error }})
    {% else %}
      Successfully scraped {{ feed.content_length }} characters from {{ feed.url }}
    {% endif %}
    </div>
    <div class="news-section">
      <h2>Latest News from {{ feed.site }}</h2>
      <div class="page-title">Page Title: {{ feed.page_title | unescape }}</div>
      <h4 style="font-size: 16px; margin-bottom: 20px; color: #40E0D0;">Recent Articles:</h4>
      <div class="articles-list">
      {% for it in feed.articles %}
        <a href="{{ it.link_url | unescape }}" target="_blank" rel="noopener noreferrer" class="article-item">
          <img src="{{ it.image_url | unescape }}" alt="{{ it.title | unescape }}" class="article-image" onerror="this.style.display='none'">
          <div class="article-title">{{ it.title | unescape }}</div>
        </a>
      {% else %}
        <p>No articles found.</p>
      {% endfor %}
      </div>
    </div>
    <div class="footer">Generated {{ date_str }}.</div>
  </div>
</body>
</html>
""")

ERROR_TMPL = _env.from_string("""
<!doctype html>
<html lang="en">
<head>""" + _HEAD + """
  <title>Gaming News Feed - Error</title>
  <style>
    body { margin:0; padding:0; font-family: 'Inter', sans-serif; background:#004D4D; color:#E0E0E0;
           display:flex; justify-content:center; align-items:center; min-height:100vh; }
    .error-container { text-align: center; }
    .error-container h1 { font-size: 32px; margin-bottom: 20px; }
    .error-message { font-size: 16px; }
  </style>
</head>
<body>
  <div class="error-container">
    <h1>Gaming News Feed</h1>
    <div class="error-message">Failed to scrape data: {{ message or "Unknown error occurred" }}</div>
  </div>
</body>
</html>
""")

def _date_str() -> str:
    return datetime.now(timezone.utc).strftime("%A, %B %d, %Y %H:%M UTC")

def render_html(feed):
    return HTML_TMPL.render(feed=feed, date_str=_date_str())

def render_error(message):
    return ERROR_TMPL.render(message=message)

def render_text(feed):
    head = "Sample data" if feed.get("is_sample") else f"{feed['content_length']} chars"
    lines = [f"Gaming News Feed - {feed['url']} ({head})", f"Page title: {unescape(feed['page_title'])}", ""]
    for it in feed["articles"]:
        lines.append(f"- {unescape(it['title'])}")
        lines.append(f"  {unescape(it['link_url'])}")
    if not feed["articles"]:
        lines.append("(no articles found)")
    return "\n".join(lines)
