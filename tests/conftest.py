"""Shared fixtures: a trimmed copy of the prime ministers table."""

import pytest


NAME_HEADER = "Name<br/>(Birth–Death)<br/>Constituency"

OFFICEHOLDER_HTML = f"""
<html>
<body>
<table class="infobox"><tr><th>Not the data</th></tr></table>
<table class="wikitable sortable">
<tbody>
<tr><th>No.</th><th>{NAME_HEADER}</th><th>Party</th></tr>
<tr><td>1</td><td><a href="/wiki/Edmund_Barton">Edmund Barton</a><br/>
  <span>(1849–1920)</span><br/>Division of
  Hunter</td><td>Protectionist</td></tr>
<tr><td>2</td><td rowspan="2"><a href="/wiki/Alfred_Deakin">Alfred Deakin</a><br/>(1856–1919)<br/>Division of Ballaarat</td><td>Protectionist</td></tr>
<tr><td>4</td><td>Protectionist</td></tr>
<tr><td></td><td>{NAME_HEADER}</td><td></td></tr>
<tr><td>3</td><td><a href="/wiki/Chris_Watson">Chris Watson</a><br/>(1867–1941)<br/>Division of Bland</td><td>Labor</td></tr>
<tr><td>31</td><td><a href="/wiki/Anthony_Albanese">Anthony Albanese</a><br/>(b. 1963)<br/>Division of Grayndler</td><td>Labor</td></tr>
</tbody>
</table>
</body>
</html>
"""


@pytest.fixture
def officeholder_html() -> str:
    return OFFICEHOLDER_HTML


@pytest.fixture
def malformed_html() -> str:
    return OFFICEHOLDER_HTML.replace(
        "(b. 1963)", "(born 1963)"
    )
