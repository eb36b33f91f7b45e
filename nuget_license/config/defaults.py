"""Default configuration values for nuget-license."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Well-known license URLs and the license they point at. Entries from the
# --licenseurl-to-license-mappings file override or extend this table.
DEFAULT_LICENSE_URL_MAPPINGS: Mapping[str, str] = MappingProxyType(
    {
        "http://www.apache.org/licenses/LICENSE-2.0": "Apache-2.0",
        "http://www.apache.org/licenses/LICENSE-2.0.html": "Apache-2.0",
        "https://www.apache.org/licenses/LICENSE-2.0": "Apache-2.0",
        "https://www.apache.org/licenses/LICENSE-2.0.html": "Apache-2.0",
        "http://aws.amazon.com/apache2.0/": "Apache-2.0",
        "https://licenses.nuget.org/Apache-2.0": "Apache-2.0",
        "http://opensource.org/licenses/MIT": "MIT",
        "https://opensource.org/licenses/MIT": "MIT",
        "http://www.opensource.org/licenses/mit-license.php": "MIT",
        "https://github.com/Microsoft/dotnet/blob/master/LICENSE": "MIT",
        "https://github.com/dotnet/corefx/blob/master/LICENSE.TXT": "MIT",
        "https://licenses.nuget.org/MIT": "MIT",
        "http://go.microsoft.com/fwlink/?LinkId=329770": "MS-EULA",
        "https://dotnet.microsoft.com/en/dotnet_library_license.htm": "MS-EULA",
        "http://opensource.org/licenses/BSD-2-Clause": "BSD-2-Clause",
        "https://opensource.org/licenses/BSD-3-Clause": "BSD-3-Clause",
        "https://licenses.nuget.org/BSD-3-Clause": "BSD-3-Clause",
        "http://www.gnu.org/licenses/lgpl-2.1.html": "LGPL-2.1-only",
        "https://www.gnu.org/licenses/lgpl-3.0.html": "LGPL-3.0-only",
        "https://www.mozilla.org/en-US/MPL/2.0/": "MPL-2.0",
    }
)
