from postfan.wire.codecs.posts import ResponseCodec
from postfan.wire.triggers.http import HTTPRouteTrigger


type Trigger = HTTPRouteTrigger
type Codec = ResponseCodec
type Exposure = tuple[Trigger, Codec]
