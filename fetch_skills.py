# =============================================================================
# 🌐 必殺技一覧ページの取得
# http://hissatuwaza.kill.jp/list/<key>.htm から技名を抜き出す
# =============================================================================

import re
import time

import requests
from bs4 import BeautifulSoup

from skill_errors import FetchError

FETCH_URL_BASE = "http://hissatuwaza.kill.jp/list/"
# html.parser は tbody を補わないので tr は子孫指定
BASE_SELECTOR = "#out > table:nth-child(3) tr > td:nth-child(2)"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
REQUEST_INTERVAL = 1.0

# 技名の後ろに付いた（よみ）を除去
READING_PATTERN = re.compile(r"[(（].*[）)]")


def build_fetch_url(kana_key, base_url=FETCH_URL_BASE):
    """ex. ki -> http://hissatuwaza.kill.jp/list/ki.htm"""
    return base_url + kana_key + ".htm"


def strip_reading(text):
    """技名から括弧書きの読みを取り除く"""
    return READING_PATTERN.sub("", text)


def extract_skill_words(html, selector=BASE_SELECTOR):
    """一覧ページのHTMLから技名を空白区切りで連結して返す"""
    try:
        soup = BeautifulSoup(html, "html.parser")
        cells = soup.select(selector)
    except Exception as e:
        raise FetchError(f"HTML解析エラー: {e}") from e

    skill_words = []
    for cell in cells:
        for anchor in cell.find_all("a"):
            skill_words.append(strip_reading(anchor.get_text()))
    return " ".join(skill_words)


def fetch_skill_words(kana_key, session=None, base_url=FETCH_URL_BASE,
                      selector=BASE_SELECTOR, user_agent=USER_AGENT):
    """1ページ分の技名を取得"""
    fetch_url = build_fetch_url(kana_key, base_url)
    client = session or requests
    headers = {"User-Agent": user_agent}

    try:
        with client.get(fetch_url, headers=headers) as response:
            response.raise_for_status()
            # Shift_JIS のページもあるので文字コード判定は bs4 に任せる
            html = response.content
    except requests.RequestException as e:
        raise FetchError(f"failed get response from {fetch_url}: {e}") from e

    try:
        return extract_skill_words(html, selector)
    except FetchError as e:
        raise FetchError(f"failed get document from {fetch_url}: {e}") from e


def print_progress(current, total, label, length=30):
    bar = "█" * (current * length // total) + "░" * (length - current * length // total)
    print(f"\r  [{bar}] {current}/{total} {label:<4}", end="", flush=True)


def fetch_skills_by_crawling(kana_keys, session=None, base_url=FETCH_URL_BASE,
                             selector=BASE_SELECTOR, user_agent=USER_AGENT,
                             request_interval=REQUEST_INTERVAL):
    """
    全キーのページを順番に取得する。

    取得に失敗したキーはエラーを表示して飛ばし、残りのキーは処理を続ける。
    Returns: 取得できたページごとの技名文字列のリスト
    """
    skill_words = []
    failures = []
    total = len(kana_keys)

    for i, kana_key in enumerate(kana_keys, 1):
        print_progress(i, total, kana_key)
        try:
            skill_words.append(
                fetch_skill_words(kana_key, session=session, base_url=base_url,
                                  selector=selector, user_agent=user_agent)
            )
        except FetchError as e:
            print(f"\n  ❌ {e}")
            failures.append(kana_key)

        if request_interval and i < total:
            time.sleep(request_interval)

    if total:
        print()
    if failures:
        print(f"  ⚠️ 取得失敗: {len(failures)}/{total} ページ ({', '.join(failures)})")
    return skill_words
