from dog_license.web.framework.page import init_page, PageSpec
from dog_license.web.pages_impl.landing import render

# MUST be the first Streamlit command on this page
init_page(PageSpec(title="Home", icon="🐕"))

render()
