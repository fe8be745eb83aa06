import logging

import click

from smhi_metobs import ArgumentCountError, MetobsConfig, MetobsError, getMetobs, parseRequest


class MetobsCommand(click.Command):
    """Command whose usage errors exit with status 1 like every other failure."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


ARGUMENTS_HELP = """
\b
Arguments:
  parameter    The meteorological parameter to retrieve provided as integer
               ID, see https://opendata.smhi.se/apidocs/metobs/parameter.html
  station      The weather station identifier as integer ID, see
               https://www.smhi.se/data/meteorologi/ladda-ner-meteorologiska-observationer
  period       One of four Periods. Valid values are latest-hour, latest-day,
               latest-months or corrected-archive. Notice that all Stations do
               not have all four Periods so make sure to check which ones are
               available in the Period level.

\b
Examples:
  getmetobs 1 159880 latest-day --output /path/to/directory
"""


@click.command(
    cls=MetobsCommand,
    epilog=ARGUMENTS_HELP,
    context_settings={'help_option_names': ['-h', '--help'], 'auto_envvar_prefix': 'GETMETOBS'},
)
@click.argument('args', nargs=-1, metavar='<parameter> <station> <period>')
@click.option('--output', '-o', default='.', show_default=True,
              help='Directory to save the downloaded file')
@click.option('--version', '-v', default='1.0', show_default=True,
              help='API version to use')
@click.option('--ext', '-e', default='csv', show_default=True,
              help='File extension for the data (e.g., csv, json)')
@click.option('--debug', is_flag=True, help='Log the request and response details')
@click.pass_context
def getmetobs(ctx, args, output, version, ext, debug):
    """Download SMHI meteorological observation data.

    getmetobs downloads meteorological observation data provided by SMHI.
    Data is saved in the specified directory (or current directory if not
    specified) with a standardized filename.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    config = MetobsConfig(output=output, version=version, ext=ext)

    try:
        request = parseRequest(args, config)
    except ArgumentCountError as e:
        err = click.UsageError(str(e), ctx=ctx)
        err.exit_code = 1
        raise err from e

    try:
        outputFile = getMetobs(request, config)
    except MetobsError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f'File downloaded successfully: {outputFile}')


def main():
    getmetobs(prog_name='getmetobs')


if __name__ == '__main__':
    main()
