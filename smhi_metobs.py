import os
import logging
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

# SMHI api
# https://opendata.smhi.se/apidocs/metobs/index.html
#https://opendata-download-metobs.smhi.se/api/version/1.0/parameter/9/station/188790/period/corrected-archive/data.csv
entryPoint = 'https://opendata-download-metobs.smhi.se/api'

# documented periods, not enforced: the api answers for unknown ones
PERIODS = ('latest-hour', 'latest-day', 'latest-months', 'corrected-archive')

chunkSize = 8192


class MetobsError(Exception):
    pass

class ArgumentCountError(MetobsError):
    pass

class TransportError(MetobsError):
    pass

class UpstreamStatusError(MetobsError):
    def __init__(self, status_code, reason=''):
        self.status_code = status_code
        self.reason = reason or ''
        self.status = f'{status_code} {self.reason}'.strip()
        super().__init__(f'Bad status: {self.status}. Check argument values')

class DirectoryCreationError(MetobsError):
    pass

class FileCreationError(MetobsError):
    pass

class CopyError(MetobsError):
    pass


@dataclass(frozen=True)
class MetobsConfig:
    output: str = '.'
    version: str = '1.0'
    ext: str = 'csv'


@dataclass(frozen=True)
class MetobsRequest:
    parameter: str
    station: str
    period: str
    version: str = '1.0'
    ext: str = 'csv'

    @property
    def url(self):
        return buildUrl(self.parameter, self.station, self.period, self.version, self.ext)

    @property
    def filename(self):
        return metobsFilename(self.parameter, self.station, self.period, self.ext)


def buildUrl(parameter, station, period, version='1.0', ext='csv'):
    # values go in verbatim, no escaping
    return f"{entryPoint}/version/{version}/parameter/{parameter}/station/{station}/period/{period}/data.{ext}"

def metobsFilename(parameter, station, period, ext='csv'):
    return f"smhi_metobs_{parameter}_{station}_{period}.{ext}"

def parseRequest(args, config=None):
    """Build the request from the three positional tokens and the config defaults."""
    config = config or MetobsConfig()
    args = list(args)
    if len(args) != 3:
        raise ArgumentCountError(f'accepts 3 arg(s) <parameter> <station> <period>, received {len(args)}')
    parameter, station, period = args
    if period not in PERIODS:
        logger.debug(f'period {period!r} is not one of {", ".join(PERIODS)}, passing it through')
    return MetobsRequest(parameter, station, period, version=config.version, ext=config.ext)

def mk(path):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(f'Error creating output directory: {e}') from e
    return path

def getMetobs(request, config=None):
    """Download one metobs file and return the path it was written to.

    The body is streamed to ``<output>/smhi_metobs_<parameter>_<station>_<period>.<ext>``.
    No timeout is set, a stalled connection blocks until the server gives up.
    A copy failure leaves the partial file on disk.
    """
    config = config or MetobsConfig()
    url = request.url
    logger.debug(f'GET {url}')

    try:
        r = requests.get(url, stream=True)
    except requests.RequestException as e:
        raise TransportError(f'Error downloading file: {e}') from e

    with r:
        logger.debug(f'response {r.status_code} {r.reason}')
        if r.status_code != 200:
            raise UpstreamStatusError(r.status_code, r.reason)

        output_folder = mk(config.output)
        outputFile = os.path.join(output_folder, request.filename)
        try:
            f = open(outputFile, 'wb')
        except OSError as e:
            raise FileCreationError(f'Error creating output file: {e}') from e

        written = 0
        with f:
            try:
                for chunk in r.iter_content(chunk_size=chunkSize):
                    if chunk:
                        f.write(chunk)
                        written += len(chunk)
            except (requests.RequestException, OSError) as e:
                raise CopyError(f'Error writing to file: {e}') from e

    logger.debug(f'{written} bytes written to {outputFile}')
    return outputFile
