"""Numeric reply and error strings sent to IRC clients."""

from __future__ import annotations

CRLF = "\r\n"


def err_nonicknamegiven(source: str) -> str:
    return f"431 {source} :Nickname not given{CRLF}"


def err_alreadyregistered(source: str) -> str:
    return f"462 {source} :You may not reregister{CRLF}"


def err_passwdmismatch(source: str) -> str:
    return f"464 {source} :Password incorrect{CRLF}"


def err_notregistered(source: str) -> str:
    return f"451 {source} :You have not registered\t\n"


def err_norecipient(nickname: str) -> str:
    return f"411 {nickname} :No recipient given (PRIVMSG){CRLF}"


def err_notexttosend(nickname: str) -> str:
    return f"412 {nickname} :No text to send{CRLF}"


def err_needmoreparams(source: str, command: str) -> str:
    return f"461 {source} {command} :Not enough parameters{CRLF}"


def err_notonchannel(source: str, channel: str) -> str:
    return f"442 {source} {channel} :You're not on that channel{CRLF}"


def err_channelisfull(source: str, channel: str) -> str:
    return f"471 {source} {channel} :Cannot join channel (+l){CRLF}"


def err_badchannelkey(source: str, channel: str) -> str:
    return f"475 {source} {channel} :Cannot join channel (+k){CRLF}"


def err_inviteonlychan(source: str, channel: str) -> str:
    return f"473 {source} {channel} :Cannot join channel (+i){CRLF}"


def err_nosuchchannel(source: str, channel: str) -> str:
    return f"403 {source} {channel} :No such channel{CRLF}"


def err_chanoprivsneeded(source: str, channel: str) -> str:
    return f"482 {source} {channel} :You're not channel operator{CRLF}"


def err_badchanmask(source: str, channel: str) -> str:
    return f"476 {source} {channel} :Bad Channel Mask{CRLF}"


def err_cannotsendtochan(source: str, channel: str) -> str:
    return f"404 {source} {channel} :Cannot send to channel{CRLF}"


def err_nicknameinuse(source: str, nickname: str) -> str:
    return f":localhost 433 {source} {nickname} :Nickname is already in use{CRLF}"


def err_erroneusnickname(source: str, nickname: str) -> str:
    return f"432 {source} {nickname} :Erroneous nickname{CRLF}"


def err_unknowncommand(source: str, command: str) -> str:
    return f"421 {source} {command} :Unknown command{CRLF}"


def err_nosuchnick(source: str, name: str) -> str:
    return f"401 {source} {name} :No such nick/channel{CRLF}"


def err_usernotinchannel(source: str, user: str, channel: str) -> str:
    return f"441 {source} {user} {channel} :They aren't on that channel{CRLF}"


def err_useronchannel(source: str, target: str, channel: str) -> str:
    return f"443 {source} {target} {channel} :is already on channel{CRLF}"


def rpl_list(source: str, client: str, channel: str, num_users: int, topic: str) -> str:
    return f"322 {source} {client} {channel} {num_users} :{topic}{CRLF}"


def rpl_listend(source: str, client: str) -> str:
    return f"323 {source} {client} :End of /LIST{CRLF}"