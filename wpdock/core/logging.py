"""wpdock console and file logging"""
from datetime import datetime


class Log:
    """
        Logs messages with colors for different messages
        according to functions
    """
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    PURPLE = '\033[95m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    ENDC = '\033[0m'

    def error(self, msg, exit=True):
        """
            Logs error into log file and exits with status 1
        """
        print(f"{Log.FAIL}❌ {msg}{Log.ENDC}", flush=True)
        self.app.log.error(msg)
        if exit:
            raise SystemExit(1)

    def info(self, msg, end='\n', log=True):
        """
            Logs info messages into log file
        """
        print(f"{Log.OKBLUE}{msg}{Log.ENDC}", end=end)
        if log:
            self.app.log.info(msg)

    def step(self, msg):
        """
            Timestamped progress line, the first line of every operation
        """
        stamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{Log.OKCYAN}[{stamp}]{Log.ENDC} {msg}")
        self.app.log.info(msg)

    def success(self, msg):
        print(f"{Log.OKGREEN}✅ {msg}{Log.ENDC}")
        self.app.log.info(msg)

    def warn(self, msg):
        """
            Logs warning into log file
        """
        print(f"{Log.WARNING}⚠️  {msg}{Log.ENDC}")
        self.app.log.warning(msg)

    def debug(self, msg):
        """
            Logs debug messages into log file
        """
        self.app.log.debug(msg, __name__)

    def valide(self, msg, end='\n', log=True):
        """
            Logs message with a done status
        """
        print(f"{Log.OKBLUE}{msg} [{Log.ENDC}{Log.OKGREEN}OK{Log.ENDC}{Log.OKBLUE}]{Log.ENDC}", end=end)
        if log:
            self.app.log.info(f"{msg} [OK]")
