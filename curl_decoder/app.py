"""
Curl Decoder - Web UI

A Streamlit-based web interface for parsing curl commands.

Run with: streamlit run curl_decoder/app.py
"""

import streamlit as st

from curl_decoder.decoder import CurlParser, DecodedRequest, EntryKind, build_request, filter_entries
from curl_decoder.exceptions import CurlDecoderError

ALL_PARTS = "all"


# Page config
st.set_page_config(
    page_title="Curl Decoder",
    page_icon="🔎",
    layout="wide",
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        margin-bottom: 1rem;
    }
    .stTextArea textarea {
        font-family: monospace;
        font-size: 12px;
    }
</style>
""", unsafe_allow_html=True)


def main():
    # Header
    st.markdown('<div class="main-header">🔎 Curl Decoder</div>', unsafe_allow_html=True)
    st.markdown("Parse a curl command into its URL, method, headers, data and flags")

    # Sidebar
    with st.sidebar:
        st.header("ℹ️ About")
        st.markdown("""
        **How to use:**
        1. Copy a curl command (e.g. from browser DevTools)
        2. Paste it in the text area
        3. Click "Decode"

        **Recognized options:**
        - `-X 'METHOD'`
        - `-H 'Name: value'`
        - `-d 'body'` / `--data 'body'`
        - valueless flags such as `-v`, `--insecure`
        """)
        strict = st.checkbox("Strict mode", value=False, key="strict",
                             help="Fail when trailing text cannot be parsed")

    col1, col2 = st.columns([1, 1])

    with col1:
        st.markdown("#### 📥 Input")
        curl_input = st.text_area(
            "Paste your curl command here:",
            height=250,
            placeholder="curl 'https://example.com/api' -H 'Accept: */*'",
            key="curl_input"
        )
        part = st.selectbox(
            "Show entries:",
            [ALL_PARTS] + [kind.value for kind in EntryKind],
            key="part"
        )
        decode_clicked = st.button("🔍 Decode", type="primary", key="decode")

    if decode_clicked and curl_input:
        try:
            entries, remainder = CurlParser(strict=strict).parse_with_remainder(curl_input)
        except CurlDecoderError as e:
            st.error(f"Error decoding command: {e}")
            return

        with col2:
            display_entries(entries if part == ALL_PARTS else filter_entries(entries, part))

        st.markdown("---")
        display_request(build_request(entries, remainder))

    elif decode_clicked:
        st.warning("Please paste a curl command first.")


def display_entries(entries):
    """Display parsed entries as a table"""
    st.markdown("#### 📊 Entries")

    if not entries:
        st.info("No entries of this kind")
        return

    table_data = []
    for entry in entries:
        data = entry.to_dict()
        if entry.kind is EntryKind.URL:
            value = entry.url.to_url()
        else:
            value = data.get('value', '')
        table_data.append({
            "Kind": entry.kind.value,
            "Flag": data.get('flag', ''),
            "Value": value,
        })
    st.dataframe(table_data, hide_index=True)


def display_request(request: DecodedRequest):
    """Display URL components and the decoded request"""
    if request.remainder:
        st.warning(f"Unparsed input ignored: {request.remainder}")

    tab1, tab2 = st.tabs(["🔗 URL", "📄 Raw JSON"])

    with tab1:
        url = request.url
        st.metric("Schema", url.schema.name)
        st.metric("Host", url.host)
        if url.path:
            st.markdown(f"**Path:** `{url.path}`")
        if url.authority:
            st.markdown(f"**User:** `{url.authority.username}`")
        if url.fragment is not None:
            st.markdown(f"**Fragment:** `{url.fragment}`")
        if url.queries:
            st.dataframe([{"Key": q.key, "Value": q.value} for q in url.queries], hide_index=True)
        else:
            st.info("No query parameters found")

    with tab2:
        st.code(request.to_json(indent=2), language="json")


if __name__ == "__main__":
    main()
