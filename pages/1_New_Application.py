from dog_license.web.framework.page import init_page, PageSpec
from dog_license.web.pages_impl.new_application import render

# MUST be the first Streamlit command on this page
settings = init_page(PageSpec(title="New Application", icon="➕"))

render(settings)
